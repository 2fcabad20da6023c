"""Tests for core data models and the symbol alphabet."""

import random

import pytest
from conftest import make_symbol

from rhythmfall.models import FeedbackText, Judgement, Position, ScoreState, Verdict
from rhythmfall.renderer.colors import SYMBOL_FALLBACK, SYMBOL_PALETTE
from rhythmfall.symbols import SymbolSet, build_palette


def test_symbol_advance_and_match():
    symbol = make_symbol(-100, "S")
    symbol.advance(6)
    symbol.advance(6)
    assert symbol.position.y == -88
    assert symbol.matches("S")
    assert not symbol.matches("W")


def test_feedback_decay_and_expiry():
    text = FeedbackText("NICE! +10", Position(0, 0), (0, 62, 49), lifetime_ms=60, duration_ms=60)
    text.decay(30)
    assert not text.is_expired()
    assert text.alpha == 127
    text.decay(30)
    assert text.is_expired()
    assert text.alpha == 0


def test_score_state_apply_hits_and_misses():
    scores = ScoreState(spawns_remaining=5)
    scores.apply(Judgement(Verdict.NICE, 10))
    scores.apply(Judgement(Verdict.PERFECT, 22))
    assert (scores.score, scores.combo, scores.max_combo) == (32, 2, 2)
    scores.apply(Judgement(Verdict.INCORRECT))
    assert (scores.score, scores.combo, scores.max_combo) == (32, 0, 2)
    scores.apply(Judgement(Verdict.NICE, 10))
    scores.record_miss()
    assert scores.combo == 0
    assert scores.missed == 1
    assert scores.verdict_counts[Verdict.NICE] == 2


def test_score_state_spawn_budget():
    scores = ScoreState(spawns_remaining=2)
    assert scores.take_spawn()
    assert scores.take_spawn()
    assert not scores.take_spawn()
    assert scores.spawns_remaining == 0


def test_score_state_reset():
    scores = ScoreState(spawns_remaining=0, score=99, combo=4, max_combo=7, missed=3)
    scores.apply(Judgement(Verdict.TOO_SOON))
    scores.reset(100)
    assert scores == ScoreState(spawns_remaining=100)


def test_palette_keeps_order_and_drops_duplicates():
    palette = build_palette("dwwa")
    assert list(palette) == ["D", "W", "A"]
    assert palette["D"] == SYMBOL_PALETTE["D"]


def test_palette_unknown_character_uses_fallback():
    assert build_palette("Q")["Q"] == SYMBOL_FALLBACK


def test_palette_rejects_empty_alphabet():
    with pytest.raises(ValueError):
        build_palette("  ")


def test_valid_keys_toggle():
    symbols = SymbolSet()
    assert symbols.is_valid_key("W")
    assert not symbols.is_valid_key("X")
    symbols.only_valid_keys = False
    assert symbols.is_valid_key("X")


def test_spawn_is_grid_aligned_above_playfield():
    symbols = SymbolSet()
    rng = random.Random(1)
    spawned = [symbols.spawn(rng, 600) for _ in range(200)]
    assert {s.position.x for s in spawned} == {100, 200, 300, 400}
    assert all(s.position.y == -100 for s in spawned)
    assert all(s.color == SYMBOL_PALETTE[s.character] for s in spawned)
    assert {s.character for s in spawned} == set(SYMBOL_PALETTE)


def test_narrow_playfield_has_one_column():
    symbols = SymbolSet()
    assert symbols.grid_columns(150) == 1
    assert symbols.spawn(random.Random(0), 150).position.x == 100
