"""
Integration tests package.

Integration tests talk to a real Supabase project. They require:
- SUPABASE_URL and SUPABASE_ANON_KEY in the environment or .env
- An advertisement_requests table the anon key may insert into and delete from

To run integration tests:
    pytest backend/tests/integration/ -v --run-integration

To skip integration tests (default):
    pytest backend/tests/ -v
"""
