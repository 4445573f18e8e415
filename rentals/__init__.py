"""
Rentals marketplace backend.

Users list places in cities, reserve other users' places and review them.
"""
