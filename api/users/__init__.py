"""
Users: registration, profile CRUD and password login.
"""
