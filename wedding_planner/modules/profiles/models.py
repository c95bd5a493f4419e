# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, references auth.users.id, on delete cascade)
- couple_names: text (not null)
- wedding_date: date (nullable)
- email: text (not null)
- is_admin: boolean (default: false) - set by backend operators only
- created_at: timestamptz (default: now())

One row per identity, inserted once at sign-up. Inserting a row triggers the
default checklist seeding (ProfileService.on_profile_created).
"""
