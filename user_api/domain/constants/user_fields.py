"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model (document and API names)"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    AGE = "age"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields a client may set through POST/PUT
    EDITABLE = (NAME, EMAIL, AGE)
