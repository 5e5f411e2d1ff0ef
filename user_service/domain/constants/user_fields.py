"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents and request/response bodies"""
    ID = "id"
    FULL_NAME = "fullName"
    EMAIL = "email"
    PASSWORD = "password"
    IMAGE_PATH = "imagePath"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
