"""nwpass.handlers -- password hash handlers"""
