"""
Database module - Generic async MongoDB connection using Motor.

Usage:
    from common.database import MongoDB

    mongo = MongoDB()
    await mongo.connect(uri, database_name)
    users = mongo.db["users"]
"""

from common.database.mongodb import MongoDB, mask_uri

__all__ = [
    "MongoDB",
    "mask_uri",
]
