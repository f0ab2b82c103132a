import pytest

from socialhub.domain.ports import AdPlatform, Platform, canonical_ad_platform, canonical_platform
from socialhub.domain.result import ErrorKind, Outcome


class TestCanonicalPlatform:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("facebook", Platform.META),
            ("instagram", Platform.META),
            ("twitter", Platform.TWITTER),
            ("x", Platform.TWITTER),
            ("X", Platform.TWITTER),
            ("google_business", Platform.GOOGLE_BUSINESS),
            ("google_business_profile", Platform.GOOGLE_BUSINESS),
            (" Bluesky ", Platform.BLUESKY),
            ("threads", Platform.THREADS),
        ],
    )
    def test_known_names(self, name, expected):
        assert canonical_platform(name) == expected

    @pytest.mark.parametrize("name", ["myspace", "", "face book", "meta", "META"])
    def test_unknown_names(self, name):
        assert canonical_platform(name) is None

    def test_ad_platforms(self):
        assert canonical_ad_platform("Google") == AdPlatform.GOOGLE
        assert canonical_ad_platform("snapchat") is None


class TestOutcome:
    def test_success(self):
        outcome = Outcome.success("post-1")

        assert outcome.ok is True
        assert outcome.value == "post-1"
        assert outcome.kind is None

    def test_failure(self):
        outcome = Outcome.failure("Request timed out after 30s", ErrorKind.TIMEOUT)

        assert outcome.ok is False
        assert outcome.kind == ErrorKind.TIMEOUT
        assert outcome.value_or([]) == []

    def test_value_or_on_success(self):
        assert Outcome.success([1, 2]).value_or([]) == [1, 2]
