"""Tests for the Instrument and Measure code tables."""

import pytest

from domain.enums import MEASURES_IN_ORDER, Instrument, Measure


class TestInstrument:
    def test_total_variants(self) -> None:
        assert Instrument.TOTAL_VARIANTS == 8
        assert len(list(Instrument)) == Instrument.TOTAL_VARIANTS

    @pytest.mark.parametrize(
        ('code', 'expected'),
        [
            (0, Instrument.SNARE),
            (1, Instrument.KICK),
            (2, Instrument.RIDE),
            (3, Instrument.GHOST),
            (4, Instrument.BASS),
            (5, Instrument.MELODIC),
            (6, Instrument.CHORDAL),
            (7, Instrument.ATMOS),
        ],
    )
    def test_from_code(self, code: int, expected: Instrument) -> None:
        assert Instrument.from_code(code) is expected
        assert expected.code == code

    @pytest.mark.parametrize('code', [-1, 8, 99, 100])
    def test_from_code_out_of_range(self, code: int) -> None:
        assert Instrument.from_code(code) is None


class TestMeasure:
    def test_total_variants(self) -> None:
        assert Measure.TOTAL_VARIANTS == 7
        assert len(list(Measure)) == Measure.TOTAL_VARIANTS

    def test_order_is_coarsest_to_finest(self) -> None:
        assert MEASURES_IN_ORDER == (
            Measure.PHRASE,
            Measure.SEGMENT,
            Measure.BAR,
            Measure.MINIM,
            Measure.BEAT,
            Measure.QUAVER,
            Measure.SEMIQUAVER,
        )

    def test_codes_round_trip(self) -> None:
        for code, measure in enumerate(MEASURES_IN_ORDER):
            assert Measure.from_code(code) is measure
            assert measure.code == code

    @pytest.mark.parametrize('code', [-1, 7, 101])
    def test_from_code_out_of_range(self, code: int) -> None:
        assert Measure.from_code(code) is None
