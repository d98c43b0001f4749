"""LSI(Link Source Identifier) 생성 및 해석 유틸리티 모듈.

Link Source Identifier encoding and decoding utilities.

LSI Format:
    <username>-<hash>_<random>

    - username: 포트폴리오 소유자 아이디 (Owner username, never contains "-")
    - hash: md5("<username>:<platform>") hex digest 앞 LSI_HASH_LENGTH 자리
            (Leading LSI_HASH_LENGTH hex digits, deterministic per user + platform)
    - random: LSI_ALPHABET에서 뽑은 LSI_RANDOM_LENGTH 자리 랜덤 문자열
              (Random suffix drawn with secrets.choice)

    "<hash>_<random>" 부분을 hash part라고 부릅니다 (The "hash part").
    hash part가 없는 값은 사용자 아이디 그 자체로 해석됩니다
    (A value without a hash part decodes to the bare username).

Example:
    create_lsi("jdoe", "github")  ->  "jdoe-3f9a1c_QwErTyU"
"""

import hashlib
import secrets

from portfolio.config import settings

# 사용자 아이디와 hash part 구분자 — Separates username from hash part
USERNAME_SEPARATOR: str = "-"
# hash와 랜덤 접미사 구분자 — Separates hash from random suffix
HASH_SEPARATOR: str = "_"


def expected_hash(username: str, platform: str) -> str:
    """사용자 + 플랫폼 조합의 결정적 해시를 계산합니다.

    Compute the deterministic hash component for a username/platform pair.

    Args:
        username: 사용자 아이디 (Owner username)
        platform: 소셜 플랫폼 이름 (Social platform name, e.g. "github")

    Returns:
        str: md5 hex digest 앞 LSI_HASH_LENGTH 자리 (Truncated md5 hex digest)
    """
    base_string: str = f"{username}:{platform}"
    return hashlib.md5(base_string.encode("utf-8")).hexdigest()[: settings.LSI_HASH_LENGTH]


def _random_suffix() -> str:
    return "".join(
        secrets.choice(settings.LSI_ALPHABET) for _ in range(settings.LSI_RANDOM_LENGTH)
    )


def create_lsi(username: str, platform: str) -> str:
    """새 LSI 문자열을 생성합니다.

    Build a new LSI for the given user and platform.
    Two LSIs for the same pair share the hash and differ in the random suffix.

    Args:
        username: 사용자 아이디 (Owner username)
        platform: 소셜 플랫폼 이름 (Social platform name)

    Returns:
        str: "<username>-<hash>_<random>" 형식의 LSI (LSI string)
    """
    return f"{username}{USERNAME_SEPARATOR}{expected_hash(username, platform)}{HASH_SEPARATOR}{_random_suffix()}"


def username_from_lsi(lsi: str) -> str:
    """LSI에서 사용자 아이디를 추출합니다. 구분자가 없으면 값 전체를 반환합니다."""
    return lsi.split(USERNAME_SEPARATOR, 1)[0]


def hash_part_from_lsi(lsi: str) -> str | None:
    """LSI에서 "<hash>_<random>" 부분을 추출합니다.

    Extract the hash part that follows the first "-".

    Returns:
        str | None: hash part, 없거나 비어 있으면 None (None when absent or empty)
    """
    parts: list[str] = lsi.split(USERNAME_SEPARATOR, 1)
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def hash_from_lsi(lsi: str) -> str | None:
    """hash part의 해시 부분을 추출합니다."""
    hash_part: str | None = hash_part_from_lsi(lsi)
    if hash_part is None:
        return None
    return hash_part.split(HASH_SEPARATOR, 1)[0] or None


def random_from_lsi(lsi: str) -> str | None:
    """hash part의 랜덤 접미사를 추출합니다."""
    hash_part: str | None = hash_part_from_lsi(lsi)
    if hash_part is None or HASH_SEPARATOR not in hash_part:
        return None
    return hash_part.split(HASH_SEPARATOR, 1)[1] or None


def is_full_lsi(lsi: str) -> bool:
    """값이 hash part를 포함한 완전한 LSI인지 확인합니다.

    A bare username (page visit without a tracking link) returns False.
    """
    return hash_part_from_lsi(lsi) is not None
