"""
Use Cases

Organized into domain folders:
- auth/: Login, session validation, logout
- officials/: Official directory, password change, bootstrap
- audit/: Audit log viewer
- reference/: Rank and department metadata

Import from subdirectories.
"""
