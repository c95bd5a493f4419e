# Supabase Auth
# Identities live in Supabase's auth.users table; no custom table is required.
# Every identity gets exactly one row in public.profiles (see modules/profiles/models.py),
# inserted right after sign-up.

"""
Supabase Auth provides:
- auth.sign_up() - Register new identities
- auth.sign_in_with_password() - Authenticate and issue an access token
- auth.get_user() - Resolve the identity behind an access token
- auth.sign_out() - End the session
- auth.reset_password_for_email() - Send a password reset email

The access token is passed to this API as "Authorization: Bearer <token>".
"""
