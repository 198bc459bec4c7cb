from brazilian_cardinality.services.spelling_service import SpellingService
from brazilian_cardinality.skill import handle_command


def test_extenso_spells_integer() -> None:
    assert handle_command("extenso 29501", SpellingService()) == (
        "vinte e nove mil quinhentos e um"
    )


def test_extenso_accepts_thousands_separator() -> None:
    assert handle_command("extenso 2.500", SpellingService()) == (
        "dois mil e quinhentos"
    )


def test_reais_accepts_brazilian_notation() -> None:
    assert handle_command("reais R$ 1.234,56", SpellingService()) == (
        "um mil duzentos e trinta e quatro reais e cinquenta e seis centavos"
    )


def test_domain_errors_become_messages() -> None:
    response = handle_command("extenso 1000000000000000", SpellingService())

    assert response.startswith("Cause: 1000000000000000 is too big")


def test_invalid_input_and_unknown_commands() -> None:
    service = SpellingService()

    assert handle_command("", service) == "Provide a command to spell out a value."
    assert handle_command("extenso dez", service).startswith("Invalid number.")
    assert handle_command("reais", service).startswith("Missing amount.")
    assert handle_command("ordinal 3", service).startswith("Unsupported command.")


def test_extenso_rejects_decimal_numbers() -> None:
    service = SpellingService()

    assert handle_command("extenso 1.5", service).startswith("Invalid number.")
    assert handle_command("extenso 3.14", service).startswith("Invalid number.")
    assert handle_command("extenso 12.34.567", service).startswith("Invalid number.")


def test_extenso_accepts_grouped_negative_numbers() -> None:
    assert handle_command("extenso -1.000.000", SpellingService()) == (
        "menos um milhão"
    )


def test_reais_reports_huge_amounts_as_too_big() -> None:
    response = handle_command("reais 1e30", SpellingService())

    assert response.startswith("Cause: 1" + "0" * 30 + " is too big")
