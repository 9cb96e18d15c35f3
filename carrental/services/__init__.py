"""Domain services: authentication controller, car catalogue and stores."""
