"""Tests for tokenization and indicator extraction."""
from ecoclassifier.extraction import analyze_temporal_context, extract_indicators, parse_text
from ecoclassifier.text import stem, stemmed_terms, tokenize


class TestTokenize:
    def test_lowercases_and_splits_on_punctuation(self):
        assert tokenize("Semi-arid, THORN scrub.") == ['semi', 'arid', 'thorn', 'scrub']

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("   \n\t") == []

    def test_stemming(self):
        assert stem('grazing') == stem('grazed')

    def test_stemmed_terms_drop_stop_words(self):
        terms = stemmed_terms("grasslands with wildflowers")
        assert 'with' not in terms
        assert stem('grasslands') in terms


class TestExtractIndicators:
    def test_keeps_only_vocabulary(self, savanna_text):
        assert extract_indicators(savanna_text) == ['grass', 'acacia', 'baobab', 'zebra', 'elephant']

    def test_deduplicates_in_first_occurrence_order(self):
        text = "Acacia and baobab trees, with zebra and more acacia"
        assert extract_indicators(text) == ['acacia', 'baobab', 'trees', 'zebra']

    def test_empty_text(self):
        assert extract_indicators("") == []

    def test_whitespace_text(self):
        assert extract_indicators("   ") == []

    def test_no_vocabulary(self, unrelated_text):
        assert extract_indicators(unrelated_text) == []


class TestTemporalContext:
    def test_historical_marker(self):
        assert analyze_temporal_context("In the colonial era the plain was open") == 'historical'

    def test_hyphenated_marker(self):
        assert analyze_temporal_context("Pre-colonial herders burned the grass") == 'historical'

    def test_modern_without_markers(self):
        assert analyze_temporal_context("Cattle graze the fenced pasture") == 'modern'


class TestParseText:
    def test_parse(self, make_text, savanna_text):
        parsed = parse_text(make_text('a', savanna_text))
        assert parsed.ecosystem_type == 'savanna'
        assert parsed.temporal_context == 'historical'
        assert 'acacia' in parsed.indicators

    def test_parse_empty_content(self, make_text):
        parsed = parse_text(make_text('a', ''))
        assert parsed.indicators == []
        assert parsed.ecosystem_type == 'unknown'
        assert parsed.temporal_context == 'modern'
