"""
概念搜尋器測試
"""

import logging

import pytest

from conceptsearch import ConceptSearch, SearchConfig
from conceptsearch.search.normalizer import is_blank_phrase, preprocess_phrase

TEST_CONCEPTS = [
    "Indian",
    "Thai",
    "Sushi",
    "Caribbean",
    "Italian",
    "West Indian",
    "Pub",
    "East Asian",
    "BBQ",
    "Chinese",
    "Portuguese",
    "Spanish",
    "French",
    "East European",
]

TEST_CASES = [
    ("I would like some thai food", {"Thai"}),
    ("Where can I find good sushi", {"Sushi"}),
    ("Find me a place that does tapas", set()),
    ("Which restaurants do East Asian food", {"East Asian"}),
    ("Which restaurants do West Indian food", {"Indian", "West Indian"}),
    ("What is the weather like today", set()),
]


class TestPreprocessPhrase:
    """前處理函數測試"""

    @pytest.mark.parametrize(
        "phrase, expected",
        [
            ("word", " word "),
            ("Word", " word "),
            ("two Words", " two words "),
            (" word", " word "),
            ("wOrD2", " word2 "),
            ("double-barrelled 'with' punctuation.", " double barrelled with punctuation "),
            ("snake_case", " snake case "),
            ("Café  Crème", " café crème "),
            ("", " "),
        ],
    )
    def test_preprocess(self, phrase, expected):
        """空白與非字母數字字元收斂為單一空白，前後補空白並轉小寫"""
        assert preprocess_phrase(phrase) == expected

    def test_non_decimal_numerics_are_separators(self):
        """上標、分數、羅馬數字等非十進位數字符號視為空白"""
        assert preprocess_phrase("x² ½ Ⅻ") == " x "
        assert preprocess_phrase("٣ apples") == " ٣ apples "

    def test_concept_next_to_superscript(self):
        """概念後面緊接上標符號仍可比對"""
        search = ConceptSearch(["X"])

        assert search.concepts_in("X²") == {"X"}

    def test_blank_phrase(self):
        """只有標點或空白的片語"""
        assert is_blank_phrase(preprocess_phrase("?!"))
        assert is_blank_phrase(preprocess_phrase(""))
        assert not is_blank_phrase(preprocess_phrase("a"))


class TestConceptSearch:
    """概念搜尋器基本功能測試"""

    @pytest.fixture(autouse=True)
    def setup(self):
        """建立共用的 ConceptSearch"""
        self.search = ConceptSearch(TEST_CONCEPTS)

    @pytest.mark.parametrize("sentence, expected", TEST_CASES)
    def test_validation_sentences(self, sentence, expected):
        """驗證句子中找到預期的概念"""
        assert self.search.concepts_in(sentence) == expected

    def test_case_and_punctuation_ignored(self):
        """不分大小寫、忽略標點"""
        assert self.search.concepts_in("THAI, or sushi?!") == {"Thai", "Sushi"}

    def test_concept_must_be_whole_words(self):
        """概念必須是完整的字，不能是字的一部分"""
        assert self.search.concepts_in("Thailand and pubs") == set()

    def test_multiple_spaces(self):
        """多個空白視同單一空白"""
        assert self.search.concepts_in("east    asian") == {"East Asian"}

    def test_find_concepts_order(self):
        """依出現順序列出 (可重複)，同一位置結尾較長者在前"""
        found = self.search.find_concepts("Thai, West Indian and thai again")

        assert found == ["Thai", "West Indian", "Indian", "Thai"]

    def test_empty_input(self):
        """空輸入"""
        assert self.search.concepts_in("") == set()

    def test_empty_concepts(self):
        """空字典"""
        search = ConceptSearch([])

        assert search.concepts == ()
        assert search.concepts_in("some text") == set()


class TestConceptDictionary:
    """概念字典的過濾行為"""

    def test_blank_concept_is_skipped(self, caplog):
        """只有標點的概念會被略過並記錄警告"""
        with caplog.at_level(logging.WARNING, logger="conceptsearch"):
            search = ConceptSearch(["Thai", "---", "  "])

        assert search.concepts == ("Thai",)
        assert search.concepts_in("a b c") == set()
        assert "略過空白概念" in caplog.text

    def test_duplicate_normalized_concept_last_wins(self, caplog):
        """前處理後相同的概念只保留最後一個"""
        with caplog.at_level(logging.WARNING, logger="conceptsearch"):
            search = ConceptSearch(["Thai", "Sushi", "THAI!"])

        assert search.concepts == ("THAI!", "Sushi")
        assert search.concepts_in("thai food") == {"THAI!"}
        assert "THAI!" in caplog.text

    def test_identical_concepts_do_not_warn(self, caplog):
        """完全相同的概念不需警告"""
        with caplog.at_level(logging.WARNING, logger="conceptsearch"):
            search = ConceptSearch(["Thai", "Thai"])

        assert search.concepts == ("Thai",)
        assert caplog.text == ""


class TestMatchEvents:
    """命中事件回呼"""

    def test_events_carry_spans(self):
        """每個命中都發出一個事件，區間指向前處理後的句子"""
        events = []
        search = ConceptSearch(["Thai", "Thai food"], on_event=events.append)

        search.find_concepts("Some Thai food")

        assert [e["concept"] for e in events] == ["Thai", "Thai food"]
        for event in events:
            assert event["type"] == "match"
            normalized = event["normalized"]
            assert normalized == " some thai food "
            assert normalized[event["start"]:event["end"]] == preprocess_phrase(event["concept"])
        assert len({e["trace_id"] for e in events}) == 1

    def test_dictionary_warnings_are_events(self):
        """字典中的異常也會以 warning 事件回報"""
        events = []
        ConceptSearch(["Thai", "...", "thai"], on_event=events.append)

        assert [e["type"] for e in events] == ["warning", "warning"]
        assert "..." in events[0]["message"]
        assert "'thai'" in events[1]["message"]

    def test_failing_handler_does_not_break_search(self, caplog):
        """回呼拋出例外時記錄並繼續"""

        def broken(event):
            raise RuntimeError("boom")

        search = ConceptSearch(["Thai"], on_event=broken)

        with caplog.at_level(logging.ERROR, logger="conceptsearch"):
            assert search.concepts_in("thai") == {"Thai"}

        assert "on_event" in caplog.text

    def test_silent_suppresses_handler_log(self, caplog):
        """silent=True 時不記錄回呼失敗"""

        def broken(event):
            raise RuntimeError("boom")

        search = ConceptSearch(["Thai"], on_event=broken)

        with caplog.at_level(logging.ERROR, logger="conceptsearch"):
            assert search.find_concepts("thai", silent=True) == ["Thai"]

        assert caplog.text == ""


class TestTimingCallback:
    """計時回呼"""

    def test_on_timing_receives_operations(self):
        """建構與掃描都會回報耗時"""
        calls = []
        search = ConceptSearch(["Thai"], on_timing=lambda op, elapsed: calls.append((op, elapsed)))
        search.concepts_in("thai")

        operations = [op for op, _ in calls]
        assert "ConceptSearch.__init__" in operations
        assert "ConceptSearch.find_concepts" in operations
        assert all(elapsed >= 0 for _, elapsed in calls)

    def test_config_object(self):
        """SearchConfig 覆蓋個別參數"""
        calls = []
        config = SearchConfig(on_timing=lambda op, elapsed: calls.append(op))

        search = ConceptSearch(["Thai"], config=config)
        search.concepts_in("thai")

        assert "ConceptSearch.find_concepts" in calls
