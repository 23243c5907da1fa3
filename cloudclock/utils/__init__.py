"""Supporting utilities (logging) for the cloudclock front-end."""
