"""Use cases.

- commands/: LoginUser, LogoutUser and their handlers
- queries/: role permission views and single permission checks
"""
