from datetime import timedelta

from src.domain.base import utcnow


def test_generate_confirmation_token_for_unconfirmed_user(make_user):
    user = make_user(confirmed=False)

    errors = user.generate_confirmation_token()

    assert not errors
    assert user.confirmation_token
    assert user.confirmation_sent_at is not None


def test_generate_confirmation_token_refuses_confirmed_user(make_user):
    user = make_user()

    errors = user.generate_confirmation_token()

    assert errors.get("email") == ["already_confirmed"]
    assert user.confirmation_token is None


def test_confirm_sets_confirmed_at_and_clears_token(make_user):
    user = make_user(confirmed=False, confirmation_token="abcd", confirmation_sent_at=utcnow())

    errors = user.confirm()

    assert not errors
    assert user.is_confirmed()
    assert user.confirmation_token is None
    assert user.confirmation_sent_at is None


def test_confirm_with_expired_token(make_user):
    user = make_user(
        confirmed=False,
        confirmation_token="abcd",
        confirmation_sent_at=utcnow() - timedelta(days=2),
    )

    errors = user.confirm()

    assert errors.get("confirmation_token") == ["expired"]
    assert not user.is_confirmed()
    assert user.confirmation_token == "abcd"
