"""Test suite for TalentTrack.

Test structure:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- api/: API endpoint tests - pages and JSON endpoints through TestClient
"""
