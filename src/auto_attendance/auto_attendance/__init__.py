"""Auto Attendance package.

Feature modules (scheduling, auth, attendance, logbook) sit behind a thin CLI
entry point, with an HTTP layer in ``api`` playing the role a repository would.
"""
