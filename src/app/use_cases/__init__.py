"""
Use Cases

Organized into domain folders:
- auth/: Register, login, refresh, logout and password reset
- profile/: Own and public account profiles
- centers/: Center affiliations
"""
