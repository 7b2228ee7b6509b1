"""Page registry.

Declares every application page, the sidebar navigation and the user menu.
Routes are generated from PAGE_REGISTRY at startup by
register_pages_from_registry().
"""

from src.domain.enums import Action, Subject
from src.domain.value_objects import Permission
from src.presentation.routers.pages.metadata import (
    AffordanceSpec,
    NavigationItemSpec,
    NavigationSectionSpec,
    PageMetadata,
)

# Shorthands used throughout the registry
READ_CANDIDATES = Permission(Action.READ, Subject.CANDIDATES)
CREATE_CANDIDATES = Permission(Action.CREATE, Subject.CANDIDATES)
UPDATE_CANDIDATES = Permission(Action.UPDATE, Subject.CANDIDATES)
DELETE_CANDIDATES = Permission(Action.DELETE, Subject.CANDIDATES)
READ_JOBS = Permission(Action.READ, Subject.JOBS)
CREATE_JOBS = Permission(Action.CREATE, Subject.JOBS)
UPDATE_JOBS = Permission(Action.UPDATE, Subject.JOBS)
READ_INTERVIEWS = Permission(Action.READ, Subject.INTERVIEWS)
CREATE_INTERVIEWS = Permission(Action.CREATE, Subject.INTERVIEWS)
READ_USERS = Permission(Action.READ, Subject.USERS)
CREATE_USERS = Permission(Action.CREATE, Subject.USERS)
UPDATE_USERS = Permission(Action.UPDATE, Subject.USERS)
READ_SETTINGS = Permission(Action.READ, Subject.SETTINGS)
UPDATE_SETTINGS = Permission(Action.UPDATE, Subject.SETTINGS)


PAGE_REGISTRY: list[PageMetadata] = [
    # =========================================================================
    # Public pages
    # =========================================================================
    PageMetadata(path="/login", title="Sign In", public=True),
    PageMetadata(path="/unauthorized", title="Access Denied", public=True),
    # =========================================================================
    # Dashboard (any signed-in identity)
    # =========================================================================
    PageMetadata(path="/", title="Dashboard"),
    # =========================================================================
    # Recruiting
    # =========================================================================
    PageMetadata(
        path="/candidates",
        title="Candidates",
        required=(READ_CANDIDATES,),
        affordances=(
            AffordanceSpec(id="add_candidate", label="Add Candidate", required=CREATE_CANDIDATES),
            AffordanceSpec(id="bulk_import", label="Bulk Import", required=CREATE_CANDIDATES),
            AffordanceSpec(id="export", label="Export", required=READ_CANDIDATES),
            AffordanceSpec(id="delete_selected", label="Delete Selected", required=DELETE_CANDIDATES),
            AffordanceSpec(id="row_edit", label="Edit", required=UPDATE_CANDIDATES),
            AffordanceSpec(id="change_stage", label="Change Stage", required=UPDATE_CANDIDATES),
            AffordanceSpec(id="row_delete", label="Delete", required=DELETE_CANDIDATES),
        ),
    ),
    PageMetadata(
        path="/jobs",
        title="Jobs",
        required=(READ_JOBS,),
        affordances=(
            AffordanceSpec(id="create_job", label="Create Job", required=CREATE_JOBS),
            AffordanceSpec(id="bulk_import", label="Bulk Import", required=CREATE_JOBS),
            AffordanceSpec(id="export", label="Export", required=READ_JOBS),
            AffordanceSpec(id="add_pipeline_level", label="Add Level", required=CREATE_JOBS),
            AffordanceSpec(id="edit_pipeline_level", label="Edit Level", required=UPDATE_JOBS),
        ),
    ),
    PageMetadata(
        path="/interviews",
        title="Interviews",
        required=(READ_INTERVIEWS,),
        affordances=(
            AffordanceSpec(
                id="schedule_interview",
                label="Schedule Interview",
                required=CREATE_INTERVIEWS,
            ),
        ),
    ),
    PageMetadata(path="/workflow", title="Workflow", required=(READ_JOBS,)),
    PageMetadata(path="/reports", title="Reports", required=(READ_JOBS,)),
    # =========================================================================
    # Administration
    # =========================================================================
    PageMetadata(
        path="/users",
        title="User Management",
        required=(READ_USERS,),
        affordances=(
            AffordanceSpec(id="add_user", label="Add User", required=CREATE_USERS),
            AffordanceSpec(id="edit_user", label="Edit User", required=UPDATE_USERS),
        ),
    ),
    PageMetadata(
        path="/roles",
        title="Role Management",
        required=(READ_USERS,),
        affordances=(
            AffordanceSpec(id="add_role", label="Add Role", required=CREATE_USERS),
        ),
    ),
    PageMetadata(
        path="/settings",
        title="Settings",
        required=(READ_SETTINGS,),
        affordances=(
            AffordanceSpec(id="update_settings", label="Save Changes", required=UPDATE_SETTINGS),
        ),
    ),
]


NAVIGATION_SECTIONS: list[NavigationSectionSpec] = [
    NavigationSectionSpec(
        title="Main",
        items=(
            NavigationItemSpec(path="/", label="Dashboard"),
            NavigationItemSpec(path="/candidates", label="Candidates", required=READ_CANDIDATES),
            NavigationItemSpec(path="/jobs", label="Jobs", required=READ_JOBS),
            NavigationItemSpec(
                path="/interviews", label="Interviews", required=READ_INTERVIEWS
            ),
            NavigationItemSpec(path="/workflow", label="Workflow", required=READ_JOBS),
            NavigationItemSpec(path="/reports", label="Reports", required=READ_JOBS),
        ),
    ),
    NavigationSectionSpec(
        title="User Management",
        items=(
            NavigationItemSpec(path="/users", label="User Management", required=READ_USERS),
            NavigationItemSpec(path="/roles", label="Role Management", required=READ_USERS),
        ),
    ),
    NavigationSectionSpec(
        title="Settings",
        items=(NavigationItemSpec(path="/settings", label="Settings", required=READ_SETTINGS),),
    ),
]


USER_MENU: list[NavigationItemSpec] = [
    NavigationItemSpec(path="/settings", label="Settings", required=UPDATE_SETTINGS),
]
