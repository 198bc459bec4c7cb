from brazilian_cardinality.domain.errors import (
    InvalidAmountError,
    NumberTooBigError,
    compose_error_message,
)


def test_compose_error_message_joins_cause_and_action() -> None:
    message = compose_error_message(cause="Bad input.", action="Fix it.")

    assert message == "Cause: Bad input. Action: Fix it."


def test_number_too_big_error_carries_offending_value() -> None:
    error = NumberTooBigError(-1_000_000_000_000_000)

    assert error.code == "NUMBER_TOO_BIG"
    assert error.status_code == 422
    assert error.details == {"number": "-1000000000000000"}
    assert error.number == -1_000_000_000_000_000
    assert "1000000000000000 is too big" in str(error)


def test_invalid_amount_error_uses_custom_message() -> None:
    error = InvalidAmountError("abc", message="Valor invalido")

    assert error.code == "INVALID_AMOUNT"
    assert error.status_code == 400
    assert error.details == {"amount": "abc"}
    assert str(error) == "Valor invalido"
