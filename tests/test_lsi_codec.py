"""LSI 인코딩/디코딩 테스트.

LSI codec tests — Format, hash determinism, and decoding of full LSIs and
bare usernames.
"""

import hashlib
import re
import string

from portfolio.config import settings
from portfolio.utils.lsi import (
    create_lsi,
    expected_hash,
    hash_from_lsi,
    hash_part_from_lsi,
    is_full_lsi,
    random_from_lsi,
    username_from_lsi,
)


class TestCreateLsi:
    """LSI 생성 테스트."""

    def test_format(self):
        """<username>-<6 hex>_<7 letters> 형식."""
        lsi = create_lsi("jdoe", "github")
        assert re.fullmatch(r"jdoe-[0-9a-f]{6}_[A-Za-z]{7}", lsi)

    def test_hash_is_truncated_md5(self):
        """해시는 md5("username:platform") 앞 6자리."""
        digest = hashlib.md5(b"jdoe:github").hexdigest()
        assert expected_hash("jdoe", "github") == digest[: settings.LSI_HASH_LENGTH]
        assert hash_from_lsi(create_lsi("jdoe", "github")) == digest[:6]

    def test_same_pair_shares_hash_but_not_suffix(self):
        """같은 사용자+플랫폼은 해시를 공유하고 랜덤 접미사는 다름."""
        first = create_lsi("jdoe", "github")
        second = create_lsi("jdoe", "github")
        assert hash_from_lsi(first) == hash_from_lsi(second)
        assert first != second

    def test_platform_changes_hash(self):
        """플랫폼이 다르면 해시가 다름."""
        assert expected_hash("jdoe", "github") != expected_hash("jdoe", "linkedin")

    def test_random_suffix_alphabet(self):
        """랜덤 접미사는 ASCII 문자만 사용."""
        suffix = random_from_lsi(create_lsi("jdoe", "twitter"))
        assert suffix is not None
        assert len(suffix) == settings.LSI_RANDOM_LENGTH
        assert set(suffix) <= set(string.ascii_letters)


class TestDecodeLsi:
    """LSI 해석 테스트."""

    def test_full_lsi(self):
        """완전한 LSI 분해."""
        lsi = "jdoe-3f9a1c_QwErTyU"
        assert username_from_lsi(lsi) == "jdoe"
        assert hash_part_from_lsi(lsi) == "3f9a1c_QwErTyU"
        assert hash_from_lsi(lsi) == "3f9a1c"
        assert random_from_lsi(lsi) == "QwErTyU"
        assert is_full_lsi(lsi) is True

    def test_bare_username(self):
        """구분자가 없으면 사용자 아이디 그 자체."""
        assert username_from_lsi("jdoe") == "jdoe"
        assert hash_part_from_lsi("jdoe") is None
        assert hash_from_lsi("jdoe") is None
        assert random_from_lsi("jdoe") is None
        assert is_full_lsi("jdoe") is False

    def test_trailing_separator_is_not_full(self):
        """"-" 뒤가 비어 있으면 hash part 없음."""
        assert username_from_lsi("jdoe-") == "jdoe"
        assert hash_part_from_lsi("jdoe-") is None
        assert is_full_lsi("jdoe-") is False

    def test_hash_without_random(self):
        """랜덤 접미사 없는 hash part."""
        assert hash_from_lsi("jdoe-3f9a1c") == "3f9a1c"
        assert random_from_lsi("jdoe-3f9a1c") is None
        assert is_full_lsi("jdoe-3f9a1c") is True

    def test_username_with_dot_and_underscore(self):
        """"." 와 "_" 가 포함된 아이디도 정확히 분리."""
        lsi = create_lsi("jane.doe_dev", "linkedin")
        assert username_from_lsi(lsi) == "jane.doe_dev"
        assert hash_from_lsi(lsi) == expected_hash("jane.doe_dev", "linkedin")
