"""Route Modules — one file per concern, registered explicitly by main.py."""
