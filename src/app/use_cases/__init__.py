"""
Use Cases

Organized into domain folders:
- auth/: Registration, sessions, confirmation, password reset and unlock flows

Import from subdirectories.
"""
