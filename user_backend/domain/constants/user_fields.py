"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    PASSWORD = "password"
    ADDRESS = "address"
    IMAGE = "image"
    IS_ADMIN = "is_admin"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields a profile update may change; email and is_admin are immutable there
    UPDATABLE = (NAME, PASSWORD, PHONE, ADDRESS, IMAGE)

    # Fields matched by the free-text user search
    SEARCHABLE = (NAME, EMAIL, PHONE)
