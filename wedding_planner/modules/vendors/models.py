# Supabase table: vendors
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to profiles.id, not null, on delete cascade) - owner
- name: text (not null)
- type: text (not null) - e.g. photographer, florist, caterer
- email: text (default: '')
- phone: text (default: '')
- cost: text (default: '') - free text, e.g. "$2,500 deposit paid"
- notes: text (default: '')
- created_at: timestamptz (default: now())
"""
