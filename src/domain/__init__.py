"""TalentTrack domain: roles, permissions and the authorization rules.

Framework-free. Subpackages:
- enums/: UserRole, Action, Subject, GuardOutcome
- value_objects/: Permission, Email
- entities/: User, Identity, Session
- authorization/: permission table, has_permission, route guard, render wrapper
- events/: session lifecycle events
- protocols/: ports implemented by the infrastructure layer
"""
