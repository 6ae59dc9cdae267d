class MembershipRole:
    """Role of a user inside a practice."""

    ADMIN = "admin"
    STAFF = "staff"
    VIEWER = "viewer"

    CHOICES = [
        (ADMIN, "Admin"),
        (STAFF, "Staff"),
        (VIEWER, "Viewer"),
    ]

    # Higher rank includes every permission of the lower ranks
    RANK = {VIEWER: 1, STAFF: 2, ADMIN: 3}

    # Roles that receive operational notifications (low stock etc.)
    NOTIFIED_ROLES = [ADMIN, STAFF]
