"""Unit tests for battle resolution."""

from __future__ import annotations

import logging

from warband.domain import battle
from warband.domain.army import Army
from warband.domain.enums import UnitKind
from warband.domain.rules_config import BattleRules, RulesConfig


def _counts(army: Army) -> dict[UnitKind, int]:
    return {kind: group.count for kind, group in army.units.items()}


def test_english_defeats_chinese():
    """Test the stronger English army wins, earns gold and costs the loser two units."""
    english = Army("English", "Red Lions")
    chinese = Army("Chinese", "Golden Tigers")

    result = battle.battle(english, chinese)

    assert result == "Red Lions wins"
    assert english.gold == 1100
    assert chinese.gold == 1000
    assert _counts(english) == {
        UnitKind.PIKEMEN: 10,
        UnitKind.ARCHERS: 10,
        UnitKind.KNIGHTS: 10,
    }
    assert _counts(chinese) == {
        UnitKind.PIKEMEN: 2,
        UnitKind.ARCHERS: 24,
        UnitKind.KNIGHTS: 1,
    }


def test_second_army_can_win():
    """Test the second army collects the reward when it is stronger."""
    chinese = Army("chinese", "Golden Tigers")
    english = Army("english", "Red Lions")

    report = battle.fight(chinese, english)

    assert report.result == "Red Lions wins"
    assert report.winner is english
    assert report.strength_a == 300
    assert report.strength_b == 350
    assert report.losses_a == [UnitKind.ARCHERS, UnitKind.KNIGHTS]
    assert report.losses_b == []
    assert english.gold == 1100
    assert chinese.gold == 1000


def test_draw_costs_each_side_one_unit():
    """Test a draw removes one unit from each side's strongest group."""
    first = Army("english", "Red Lions")
    second = Army("english", "White Harts")

    report = battle.fight(first, second)

    assert report.is_draw
    assert report.result == "Draw"
    assert report.losses_a == [UnitKind.KNIGHTS]
    assert report.losses_b == [UnitKind.KNIGHTS]
    for army in (first, second):
        assert army.gold == 1000
        assert _counts(army) == {
            UnitKind.PIKEMEN: 10,
            UnitKind.ARCHERS: 10,
            UnitKind.KNIGHTS: 9,
        }


def test_both_armies_log_the_same_result():
    """Test both armies record the opponent and the identical result."""
    english = Army("english", "Red Lions")
    byzantine = Army("byzantine", "Purple Eagles")

    result = battle.battle(english, byzantine)

    assert result == "Purple Eagles wins"
    assert len(english.battle_history) == 1
    assert len(byzantine.battle_history) == 1
    english_record = english.battle_history[0]
    byzantine_record = byzantine.battle_history[0]
    assert english_record.opponent_name == "Purple Eagles"
    assert english_record.opponent_civilization == "byzantine"
    assert byzantine_record.opponent_name == "Red Lions"
    assert byzantine_record.opponent_civilization == "english"
    assert english_record.result == byzantine_record.result == result


def test_history_accumulates_in_order():
    """Test repeated battles append records chronologically."""
    english = Army("english", "Red Lions")
    chinese = Army("chinese", "Golden Tigers")

    first = battle.battle(english, chinese)
    second = battle.battle(english, chinese)

    assert [record.result for record in english.battle_history] == [first, second]
    assert [record.result for record in chinese.battle_history] == [first, second]
    assert english.gold == 1200


def test_empty_armies_draw():
    """Test two armies without units draw without error."""
    rules = RulesConfig(civilizations={"hermit": {}})
    first = Army("hermit", "A", rules=rules)
    second = Army("hermit", "B", rules=rules)

    assert battle.battle(first, second, rules=rules) == "Draw"
    assert first.units == {}
    assert second.units == {}


def test_custom_battle_rules():
    """Test injected battle rules change the reward and losses."""
    rules = RulesConfig(battle=BattleRules(victory_reward=250, defeat_losses=3))
    english = Army("english", "Red Lions", rules=rules)
    chinese = Army("chinese", "Golden Tigers", rules=rules)

    report = battle.fight(english, chinese, rules=rules)

    assert english.gold == 1250
    assert report.losses_b == [UnitKind.ARCHERS, UnitKind.KNIGHTS, UnitKind.PIKEMEN]


def test_battle_outcome_is_logged(caplog):
    """Test the battle outcome is logged at INFO."""
    english = Army("english", "Red Lions")
    chinese = Army("chinese", "Golden Tigers")

    with caplog.at_level(logging.INFO, logger="warband.domain.battle"):
        battle.battle(english, chinese)

    assert "Red Lions wins" in caplog.text


def test_records_keep_opponent_civilization_spelling():
    """Test battle records show the civilization as the opponent army was raised."""
    english = Army("English", "Red Lions")
    chinese = Army("Chinese", "Golden Tigers")

    battle.battle(english, chinese)

    assert english.battle_history[0].opponent_civilization == "Chinese"
    assert chinese.battle_history[0].opponent_civilization == "English"
