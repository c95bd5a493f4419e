"""
Row-level authorization: the ownership rules the service layer applies before reading or writing a row
"""

from fastapi import HTTPException, status
from typing import Optional


def can_access_row(owner_id: Optional[str], user_id: str, admin: bool = False, write: bool = False) -> bool:
    """Owner may read and write its rows; an admin may read any row but write only its own."""
    if owner_id is not None and owner_id == user_id:
        return True
    return admin and not write


def check_row_access(
    row: Optional[dict],
    user_data: dict,
    admin: bool = False,
    write: bool = False,
    resource: str = "Row"
) -> dict:
    """Raise 404 when the row is missing and 403 when the caller may not touch it; return the row otherwise"""
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found"
        )
    if not can_access_row(row.get("user_id"), user_data["id"], admin=admin, write=write):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You do not have access to this {resource.lower()}"
        )
    return row
