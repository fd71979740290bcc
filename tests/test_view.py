import pytest

from jvida.model import Cell
from jvida.view import Message, format_cells, menu_text, message_text, rules_text


def test_message_text_by_member():
    assert message_text(Message.SAVE_OK) == "Salvamento realizado com sucesso!\n"


def test_message_text_by_number():
    assert message_text(10) == "Carregamento concluido com sucesso\n"
    assert message_text(2) == message_text(Message.OUT_OF_BOUNDS)


def test_every_message_has_text():
    for message in Message:
        assert message_text(message).endswith("\n")


def test_unknown_message_number_raises():
    with pytest.raises(ValueError):
        message_text(11)


def test_menu_lists_options():
    text = menu_text()
    assert "0  - Sair" in text.splitlines()
    assert "ANUBIS LIFE'S GAME" in text
    assert "8 - Regras de evolucao das celulas" in text


def test_rules_mention_each_rule():
    text = rules_text()
    for word in ("Reproducao", "Sobrevivencia", "Morte por falta de comida", "Morte por solidao"):
        assert word in text


def test_format_cells():
    assert format_cells([Cell(1, 2), Cell(3, 4)]) == "|1,2| |3,4| "


def test_format_no_cells():
    assert format_cells([]) == ""


def test_format_cells_count():
    cells = [Cell(i, i + 1) for i in range(5)]
    assert format_cells(cells).count("|") == 2 * len(cells)