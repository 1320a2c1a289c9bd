import pytest
from packages.engine import WordfreqOracle, WordSetOracle
from packages.engine.oracle import DEFAULT_MIN_ZIPF, ZIPF_CACHE_SIZE, cached_zipf


def test_word_set_oracle_is_case_insensitive():
    oracle = WordSetOracle(["Silk", " worm ", ""])
    assert len(oracle) == 2
    assert oracle.is_known_word("silk")
    assert oracle.is_known_word("WORM", "en")
    assert not oracle.is_known_word("milk")
    assert not oracle.is_known_word("")


def test_wordfreq_oracle_known_and_unknown():
    oracle = WordfreqOracle()
    assert oracle.min_zipf == DEFAULT_MIN_ZIPF == 3.0
    assert oracle.is_known_word("milk", "en") is True
    assert oracle.is_known_word("work") is True
    assert oracle.is_known_word("qzxvkj") is False


def test_wordfreq_oracle_threshold():
    assert WordfreqOracle(min_zipf=8.0).is_known_word("the") is False  # nothing is that frequent
    assert WordfreqOracle(min_zipf=0.0).is_known_word("the") is True


def test_zipf_cache_is_bounded_and_shared():
    assert cached_zipf.cache_info().maxsize == ZIPF_CACHE_SIZE
    cached_zipf.cache_clear()
    WordfreqOracle().is_known_word("milk")
    WordfreqOracle(min_zipf=1.0).is_known_word("milk")
    info = cached_zipf.cache_info()
    assert (info.misses, info.hits) == (1, 1)


def test_wordfreq_oracle_rejects_negative_threshold():
    with pytest.raises(ValueError):
        WordfreqOracle(min_zipf=-1)
