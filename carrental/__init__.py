"""Car rental API: authentication, role-based access and the car catalogue."""
