import enum


class UserRole(str, enum.Enum):
    external_super_admin = "EXTERNAL_SUPER_ADMIN"
    external_member = "EXTERNAL_MEMBER"
    external_user = "EXTERNAL_USER"
    internal_admin = "INTERNAL_ADMIN"


class TeamErrorCode(str, enum.Enum):
    already_exists = "ALREADY_EXISTS"
    not_found = "NOT_FOUND"
    name_exists = "NAME_EXISTS"
    create_failure = "CREATE_FAILURE"
    user_in_team = "USER_IN_TEAM"
    not_a_member = "NOT_A_MEMBER"
    admin_required = "ADMIN_REQUIRED"
    same_team = "SAME_TEAM"
    transaction_failure = "TRANSACTION_FAILURE"
