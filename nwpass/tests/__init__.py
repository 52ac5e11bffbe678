"""nwpass tests"""
