"""Constants for User model field names"""


class UserFields:
    """Field name constants for persisted user records"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD_HASH = "password_hash"
    ACCESS_TOKEN = "access_token"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
