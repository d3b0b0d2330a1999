from users_app.api.error_handlers import (
    USER_REPO_ERRORS,
    classify_validation_error,
    user_repo_error_response,
)
from users_app.domain.errors import AppError, UserRepoErrorKind, UserRepositoryError


def test_table_covers_every_kind():
    assert set(USER_REPO_ERRORS) == set(UserRepoErrorKind)


def test_not_found_response():
    assert user_repo_error_response(UserRepositoryError(UserRepoErrorKind.NOT_FOUND)) == (
        404,
        {"error": "user not found"},
    )


def test_invalid_username_response():
    assert user_repo_error_response(UserRepositoryError(UserRepoErrorKind.INVALID_USERNAME)) == (
        400,
        {"error": "invalid username"},
    )


def test_repository_error_is_tagged_as_app_error():
    err = UserRepositoryError(UserRepoErrorKind.NOT_FOUND)

    assert isinstance(err, AppError)
    assert err.kind is UserRepoErrorKind.NOT_FOUND
    assert repr(err) == "UserRepositoryError(NOT_FOUND)"


def test_classify_path_error_wins_over_body_errors():
    errors = [
        {"loc": ("body", "username"), "type": "missing"},
        {"loc": ("path", "user_id"), "type": "uuid_parsing"},
    ]

    assert classify_validation_error(errors) == (400, "invalid user id")


def test_classify_json_invalid():
    assert classify_validation_error([{"loc": ("body", 13), "type": "json_invalid"}]) == (400, "malformed JSON body")


def test_classify_shape_error():
    assert classify_validation_error([{"loc": ("body", "username"), "type": "string_type"}]) == (
        422,
        "invalid request body",
    )
