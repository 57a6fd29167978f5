"""Repository, download, integrity and lockfile components."""
