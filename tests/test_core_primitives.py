"""
Tests for core music primitives.

Tests cover:
- PitchClass and the note table (pitch.py)
- Key, degree offsets and spelling (scale.py)
- ChordQuality, Chord, build_chord (chord.py)
"""

import pytest

from chuk_mcp_chords.constants import Mode
from chuk_mcp_chords.core import (
    NOTE_TO_MIDI,
    SHARP_NAMES,
    Chord,
    ChordQuality,
    Key,
    PitchClass,
    build_chord,
    chord_quality_for,
    chromatic_degree_name,
    degree_index,
    degree_offset,
    diatonic_chords,
    format_note,
    midi_to_note,
    note_to_midi,
    pitch_class_of,
    preferred_spelling,
    scale_notes,
    spelled_degree_note,
)
from chuk_mcp_chords.core.scale import degree_pitch_class
from chuk_mcp_chords.errors import InvalidNoteError


class TestPitchClass:
    """Tests for PitchClass enum and the note table."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.A.transpose(3) == PitchClass.C

    def test_enharmonics_share_class(self) -> None:
        """Sharp and flat spellings map to the same class."""
        assert pitch_class_of("C#") == pitch_class_of("Db") == PitchClass.Cs
        assert pitch_class_of("D#") == pitch_class_of("Eb") == PitchClass.Ds
        assert pitch_class_of("F#") == pitch_class_of("Gb") == PitchClass.Fs
        assert pitch_class_of("G#") == pitch_class_of("Ab") == PitchClass.Gs
        assert pitch_class_of("A#") == pitch_class_of("Bb") == PitchClass.As

    def test_key_signature_spellings(self) -> None:
        """E# and Cb are accepted and land on F and B."""
        assert pitch_class_of("E#") == PitchClass.F
        assert pitch_class_of("Cb") == PitchClass.B

    def test_core_spellings_all_present(self) -> None:
        """All naturals, sharps and flats are in the table."""
        core = [
            "C", "C#", "Db", "D", "D#", "Eb", "E", "F", "F#",
            "Gb", "G", "G#", "Ab", "A", "A#", "Bb", "B",
        ]  # fmt: skip
        assert len(core) == 17
        for name in core:
            assert name in NOTE_TO_MIDI

    def test_reverse_table_is_sharp_spelled(self) -> None:
        """Every class has exactly one canonical name, sharp spelled."""
        assert len(SHARP_NAMES) == 12
        for value, name in enumerate(SHARP_NAMES):
            assert pitch_class_of(name) == value
            assert PitchClass(value).spell() == name

    def test_parse_is_case_sensitive(self) -> None:
        """Lower-case letters and unknown names are rejected."""
        for name in ["c", "H", "C##", "Cbb", "", "db", "C #"]:
            with pytest.raises(InvalidNoteError):
                pitch_class_of(name)

    def test_invalid_note_message(self) -> None:
        """The error names the offending note."""
        with pytest.raises(InvalidNoteError, match="Invalid root note: 'H'") as exc_info:
            PitchClass.parse("H")
        assert exc_info.value.note == "H"

    def test_note_to_midi(self) -> None:
        """Octave 4 is the anchor, other octaves shift by 12."""
        assert note_to_midi("C") == 60
        assert note_to_midi("A", 4) == 69
        assert note_to_midi("C", 5) == 72
        assert note_to_midi("Db", 3) == 49
        assert note_to_midi("C", -1) == 0

    def test_spellings_of_one_class_share_pitch(self) -> None:
        """Enharmonic spellings give the same absolute pitch."""
        assert note_to_midi("E#") == note_to_midi("F")
        assert note_to_midi("Cb") == note_to_midi("B")
        assert note_to_midi("Gb") == note_to_midi("F#")

    def test_midi_to_note(self) -> None:
        """Split MIDI numbers into canonical name and octave."""
        assert midi_to_note(60) == ("C", 4)
        assert midi_to_note(61) == ("C#", 4)
        assert midi_to_note(72) == ("C", 5)
        assert midi_to_note(0) == ("C", -1)
        assert midi_to_note(127) == ("G", 9)

    def test_midi_to_note_negative(self) -> None:
        """Negative pitches floor to lower octaves."""
        assert midi_to_note(-1) == ("B", -2)
        assert midi_to_note(-12) == ("C", -2)

    def test_format_note(self) -> None:
        assert format_note(70) == "A#4"
        assert format_note(74) == "D5"


class TestKey:
    """Tests for Key."""

    def test_create_key(self) -> None:
        key = Key("Bb", Mode.MINOR)
        assert key.root == "Bb"
        assert key.mode == Mode.MINOR
        assert key.pitch_class == PitchClass.As
        assert key.is_minor
        assert str(key) == "Bb minor"

    def test_default_mode_is_major(self) -> None:
        assert Key("C").mode == Mode.MAJOR

    def test_unknown_root_rejected(self) -> None:
        with pytest.raises(InvalidNoteError):
            Key("H")

    def test_immutable(self) -> None:
        key = Key("C")
        with pytest.raises(AttributeError):
            key.root = "D"  # type: ignore[misc]


class TestDegrees:
    """Tests for degree arithmetic."""

    def test_degree_index_in_range(self) -> None:
        assert [degree_index(d) for d in range(1, 8)] == [0, 1, 2, 3, 4, 5, 6]

    def test_degree_index_wraps(self) -> None:
        """Any integer resolves to a valid index."""
        assert degree_index(8) == 0
        assert degree_index(9) == 1
        assert degree_index(0) == 6
        assert degree_index(-1) == 5
        assert degree_index(-6) == 0
        assert degree_index(15) == 0

    def test_major_offsets(self) -> None:
        offsets = [degree_offset(Mode.MAJOR, d) for d in range(1, 8)]
        assert offsets == [0, 2, 4, 5, 7, 9, 11]

    def test_minor_offsets(self) -> None:
        offsets = [degree_offset(Mode.MINOR, d) for d in range(1, 8)]
        assert offsets == [0, 2, 3, 5, 7, 8, 10]

    def test_wrapped_degree_offset(self) -> None:
        assert degree_offset(Mode.MAJOR, 0) == 11
        assert degree_offset(Mode.MINOR, 10) == 3

    def test_degree_pitch_class(self) -> None:
        assert degree_pitch_class(Key("D", Mode.MINOR), 3) == PitchClass.F
        assert degree_pitch_class(Key("G"), 7) == PitchClass.Fs


class TestSpelling:
    """Tests for the two spelling stages."""

    def test_chromatic_name_is_sharp(self) -> None:
        """Stage 1 always spells with sharps."""
        assert chromatic_degree_name(Key("Db"), 1) == "C#"
        assert chromatic_degree_name(Key("F"), 4) == "A#"

    def test_preferred_spelling_lookup(self) -> None:
        """Stage 2 uses the key-signature table."""
        assert preferred_spelling("F", 3) == "Bb"
        assert preferred_spelling("F#", 6) == "E#"
        assert preferred_spelling("Gb", 3) == "Cb"

    def test_preferred_spelling_missing_root(self) -> None:
        """Roots without a table entry have no preference."""
        assert preferred_spelling("C#", 0) is None
        assert preferred_spelling("A#", 2) is None

    def test_c_major_scale(self) -> None:
        assert scale_notes(Key("C")) == ["C", "D", "E", "F", "G", "A", "B"]

    def test_flat_keys_spell_with_flats(self) -> None:
        assert scale_notes(Key("Db")) == ["Db", "Eb", "F", "Gb", "Ab", "Bb", "C"]
        assert scale_notes(Key("Eb")) == ["Eb", "F", "G", "Ab", "Bb", "C", "D"]

    def test_f_sharp_major_seventh_is_e_sharp(self) -> None:
        key = Key("F#")
        assert spelled_degree_note(key, 7) == "E#"
        assert spelled_degree_note(key, 5) == "C#"

    def test_g_flat_major_fourth_is_c_flat(self) -> None:
        assert spelled_degree_note(Key("Gb"), 4) == "Cb"

    def test_fallback_for_unlisted_root(self) -> None:
        """C# major has no table entry and falls back to sharp names."""
        assert scale_notes(Key("C#")) == ["C#", "D#", "F", "F#", "G#", "A#", "C"]

    def test_minor_reuses_major_table(self) -> None:
        """Minor keys use the major table where the pitch matches."""
        assert scale_notes(Key("A", Mode.MINOR)) == ["A", "B", "C", "D", "E", "F", "G"]
        assert scale_notes(Key("Bb", Mode.MINOR)) == ["Bb", "C", "C#", "Eb", "F", "F#", "G#"]
        assert scale_notes(Key("C", Mode.MINOR)) == ["C", "D", "D#", "F", "G", "G#", "A#"]

    def test_wrapped_degree_spelling(self) -> None:
        key = Key("F#")
        assert spelled_degree_note(key, 14) == "E#"
        assert spelled_degree_note(key, 0) == "E#"
        assert spelled_degree_note(key, 8) == "F#"

    @pytest.mark.parametrize("mode", [Mode.MAJOR, Mode.MINOR])
    def test_spelling_never_changes_pitch_class(self, mode: Mode) -> None:
        """Every spelled degree looks up to the computed pitch class."""
        for root in NOTE_TO_MIDI:
            key = Key(root, mode)
            for degree in range(-7, 15):
                name = spelled_degree_note(key, degree)
                assert pitch_class_of(name) == degree_pitch_class(key, degree), (root, degree)


class TestChordQuality:
    """Tests for ChordQuality."""

    def test_major_triad(self) -> None:
        assert ChordQuality.MAJOR.intervals == (0, 4, 7)
        assert not ChordQuality.MAJOR.is_minor
        assert ChordQuality.MAJOR.suffix == ""

    def test_minor_triad(self) -> None:
        assert ChordQuality.MINOR.intervals == (0, 3, 7)
        assert ChordQuality.MINOR.is_minor
        assert ChordQuality.MINOR.suffix == "m"

    def test_get_midi_notes(self) -> None:
        assert ChordQuality.MINOR.get_midi_notes(69) == [69, 72, 76]


class TestChordQualityRule:
    """Tests for diatonic quality assignment."""

    def test_major_key_pattern(self) -> None:
        minor = [d for d in range(1, 8) if chord_quality_for(Mode.MAJOR, d).is_minor]
        assert minor == [2, 3, 6]

    def test_minor_key_pattern(self) -> None:
        minor = [d for d in range(1, 8) if chord_quality_for(Mode.MINOR, d).is_minor]
        assert minor == [1, 4, 5]

    def test_no_diminished_triads(self) -> None:
        """Degree 7 in major is built as a plain major triad."""
        assert chord_quality_for(Mode.MAJOR, 7) == ChordQuality.MAJOR
        assert chord_quality_for(Mode.MINOR, 2) == ChordQuality.MAJOR

    def test_wrapped_degrees(self) -> None:
        assert chord_quality_for(Mode.MAJOR, 9) == ChordQuality.MINOR
        assert chord_quality_for(Mode.MINOR, 8) == ChordQuality.MINOR

    @pytest.mark.parametrize("pitch_class", list(PitchClass))
    def test_every_root_follows_pattern(self, pitch_class: PitchClass) -> None:
        """All 12 chromatic roots get the same quality pattern."""
        for mode, minor_degrees in [(Mode.MAJOR, {2, 3, 6}), (Mode.MINOR, {1, 4, 5})]:
            key = Key(pitch_class.spell(), mode)
            for degree in range(1, 8):
                chord = build_chord(key, degree)
                assert chord.is_minor == (degree in minor_degrees)
                third = chord.third - chord.root
                assert third == (3 if degree in minor_degrees else 4)
                assert chord.fifth - chord.root == 7


class TestBuildChord:
    """Tests for build_chord."""

    def test_c_major_tonic(self) -> None:
        chord = build_chord(Key("C"), 1)
        assert chord.pitches == (60, 64, 67)
        assert chord.note_names == ["C4", "E4", "G4"]
        assert chord.symbol == "C"
        assert chord.numeral == "I"

    def test_subdominant_crosses_octave(self) -> None:
        chord = build_chord(Key("C"), 4)
        assert chord.note_names == ["F4", "A4", "C5"]

    def test_minor_chord(self) -> None:
        chord = build_chord(Key("C"), 6)
        assert chord.root_name == "A"
        assert chord.quality == ChordQuality.MINOR
        assert chord.pitches == (69, 72, 76)
        assert chord.symbol == "Am"
        assert chord.numeral == "vi"

    def test_spelled_root_name(self) -> None:
        chord = build_chord(Key("Gb"), 4)
        assert chord.root_name == "Cb"
        assert chord.symbol == "Cb"
        assert chord.pitches == (71, 75, 78)
        # Display names use the canonical sharp table
        assert chord.note_names == ["B4", "D#5", "F#5"]

    def test_octave_override(self) -> None:
        assert build_chord(Key("C"), 1, octave=5).pitches == (72, 76, 79)
        assert build_chord(Key("C"), 1, octave=2).note_names == ["C2", "E2", "G2"]

    def test_negative_octave(self) -> None:
        chord = build_chord(Key("C"), 1, octave=-2)
        assert chord.pitches == (-12, -8, -5)
        assert chord.note_names == ["C-2", "E-2", "G-2"]

    def test_chord_is_immutable(self) -> None:
        chord = build_chord(Key("C"), 1)
        assert isinstance(chord, Chord)
        with pytest.raises(AttributeError):
            chord.pitches = (0, 0, 0)  # type: ignore[misc]

    def test_diatonic_chords(self) -> None:
        symbols = [chord.symbol for chord in diatonic_chords(Key("Eb"))]
        assert symbols == ["Eb", "Fm", "Gm", "Ab", "Bb", "Cm", "D"]

    def test_diatonic_chords_minor(self) -> None:
        numerals = [chord.numeral for chord in diatonic_chords(Key("A", Mode.MINOR))]
        assert numerals == ["i", "II", "III", "iv", "v", "VI", "VII"]
