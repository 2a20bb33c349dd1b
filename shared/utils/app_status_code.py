class AppStatusCode:
    # Success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"
    DELETED_SUCCESSFULLY = "103"
    OPERATION_SUCCESSFUL = "104"

    # Input
    INVALID_INPUT = "200"
    DUPLICATE_ADD_ERROR = "201"
    FILE_TYPE_NOT_ALLOWED = "202"
    FILE_TOO_LARGE = "203"

    # Lookup / operation
    NOT_FOUND = "300"
    OPERATION_ERROR = "301"
    OPERATION_FAILED = "302"

    # Authentication
    AUTHENTICATION_TOKEN_INVALID = "400"
    AUTHENTICATION_TOKEN_EXPIRED = "401"
    AUTHENTICATION_USER_INVALID = "402"

    # Integrations
    INTEGRATION_ERROR = "500"
    STORAGE_ERROR = "501"
