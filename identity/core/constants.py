"""Table, column and status names shared by models, services and the query builder."""

TABLE_USER = "user"
TABLE_GROUP = "group"
TABLE_USER_GROUP_BINDING = "user_group_binding"

COLUMN_USER_ID = "user_id"
COLUMN_USERNAME = "username"
COLUMN_EMAIL = "email"
COLUMN_PHONE_NUMBER = "phone_number"
COLUMN_DESCRIPTION = "description"
COLUMN_PASSWORD = "password"
COLUMN_STATUS = "status"
COLUMN_CREATE_TIME = "create_time"
COLUMN_UPDATE_TIME = "update_time"
COLUMN_STATUS_TIME = "status_time"

COLUMN_GROUP_ID = "group_id"
COLUMN_PARENT_GROUP_ID = "parent_group_id"
COLUMN_GROUP_PATH = "group_path"
COLUMN_NAME = "name"

COLUMN_BINDING_ID = "id"

STATUS_ACTIVE = "active"
STATUS_DISABLED = "disabled"
STATUS_DELETED = "deleted"

USER_ID_PREFIX = "usr-"
GROUP_ID_PREFIX = "grp-"
BINDING_ID_PREFIX = "ugb-"

# Separator appended after every id in a materialised group path
GROUP_PATH_SEPARATOR = "."

USER_COLUMNS = (
    COLUMN_USER_ID,
    COLUMN_USERNAME,
    COLUMN_EMAIL,
    COLUMN_PHONE_NUMBER,
    COLUMN_DESCRIPTION,
    COLUMN_STATUS,
    COLUMN_CREATE_TIME,
    COLUMN_UPDATE_TIME,
    COLUMN_STATUS_TIME,
)

GROUP_COLUMNS = (
    COLUMN_GROUP_ID,
    COLUMN_PARENT_GROUP_ID,
    COLUMN_GROUP_PATH,
    COLUMN_NAME,
    COLUMN_DESCRIPTION,
    COLUMN_STATUS,
    COLUMN_CREATE_TIME,
    COLUMN_UPDATE_TIME,
    COLUMN_STATUS_TIME,
)

USER_GROUP_BINDING_COLUMNS = (
    COLUMN_BINDING_ID,
    COLUMN_USER_ID,
    COLUMN_GROUP_ID,
    COLUMN_CREATE_TIME,
)

INDEXED_COLUMNS = {
    TABLE_USER: (
        COLUMN_USER_ID,
        COLUMN_USERNAME,
        COLUMN_EMAIL,
        COLUMN_PHONE_NUMBER,
        COLUMN_STATUS,
    ),
    TABLE_GROUP: (
        COLUMN_GROUP_ID,
        COLUMN_PARENT_GROUP_ID,
        COLUMN_GROUP_PATH,
        COLUMN_NAME,
        COLUMN_STATUS,
    ),
    TABLE_USER_GROUP_BINDING: (
        COLUMN_USER_ID,
        COLUMN_GROUP_ID,
    ),
}

SEARCH_COLUMNS = {
    TABLE_USER: (
        COLUMN_USER_ID,
        COLUMN_USERNAME,
        COLUMN_EMAIL,
        COLUMN_PHONE_NUMBER,
        COLUMN_DESCRIPTION,
    ),
    TABLE_GROUP: (
        COLUMN_GROUP_ID,
        COLUMN_NAME,
        COLUMN_DESCRIPTION,
    ),
}

SEARCH_WORD_TABLES = (
    TABLE_USER,
    TABLE_GROUP,
)
