# Supabase table: tasks
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to profiles.id, not null, on delete cascade) - owner
- task_name: text (not null)
- phase: text (not null) - one of config.checklist_config.PHASES
- completed: boolean (default: false)
- created_at: timestamptz (default: now())

60 rows (10 per phase) are inserted for every new profile. Listing is by
created_at ascending, which is the checklist template order.
"""
