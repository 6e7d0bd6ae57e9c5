"""
Word Validity Unit Tests

Tests for the word list vocabulary and its YAML loading.
"""

import pytest
import yaml

from worddeck.core.word_validity import (
    AcceptAllWordValidity, WordListValidationError, WordListValidity
)


class TestWordListValidity:
    """Test vocabulary lookups"""

    def test_lookup_is_case_insensitive(self):
        validity = WordListValidity(['cat', ' Dog '])

        assert validity.is_valid('CAT')
        assert validity.is_valid('dog')
        assert not validity.is_valid('EMU')
        assert len(validity) == 2

    def test_empty_word_is_invalid(self):
        assert not WordListValidity(['CAT']).is_valid('')

    def test_accept_all(self):
        validity = AcceptAllWordValidity()

        assert validity.is_valid('XYZZY')
        assert not validity.is_valid('')


class TestLoadFromYaml:
    """Test loading word lists"""

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / 'words.yaml'
        path.write_text("words:\n  - CAT\n  - dog\n")

        validity = WordListValidity.from_yaml(str(path))

        assert len(validity) == 2
        assert validity.is_valid('DOG')

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            WordListValidity.from_yaml(str(tmp_path / 'missing.yaml'))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'words.yaml'
        path.write_text("words: [CAT, DOG\n")

        with pytest.raises(yaml.YAMLError):
            WordListValidity.from_yaml(str(path))

    @pytest.mark.parametrize('content', [
        "- CAT\n",
        "vocabulary:\n  - CAT\n",
        "words: CAT\n",
        "words: []\n",
        "words:\n  - CAT\n  - ''\n",
        "words:\n  - C4T\n",
    ])
    def test_invalid_structure(self, tmp_path, content):
        path = tmp_path / 'words.yaml'
        path.write_text(content)

        with pytest.raises(WordListValidationError):
            WordListValidity.from_yaml(str(path))

    def test_bundled_word_list_loads(self):
        import os
        import container

        path = os.path.join(os.path.dirname(os.path.abspath(container.__file__)), 'words.yaml')
        validity = WordListValidity.from_yaml(path)

        assert len(validity) > 0
        assert validity.is_valid('CAT')
        assert validity.is_valid('YES')
        assert validity.is_valid('TRUE')
        assert not validity.is_valid('TAC')

    def test_unquoted_boolean_word_is_named_in_error(self, tmp_path):
        path = tmp_path / 'words.yaml'
        path.write_text("words:\n  - CAT\n  - YES\n")

        with pytest.raises(WordListValidationError, match="Word 1 must be a string, got bool True"):
            WordListValidity.from_yaml(str(path))
