# Supabase table: guests
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to profiles.id, not null, on delete cascade) - owner
- first_name: text (not null)
- last_name: text (not null)
- email: text (default: '')
- phone: text (default: '')
- group_name: text (default: '') - e.g. "Bride's family"
- rsvp_status: text (default: 'pending') - values: pending, attending, declined
- plus_one: text (default: '') - name of the plus one, if any
- table_number: integer (nullable)
- dietary_restrictions: text (default: '')
- created_at: timestamptz (default: now())
"""
