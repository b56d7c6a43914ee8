import unittest

from people_search import InvalidStrategyError, InvertedIndex, SearchService, Strategy
from people_search.search import (
    complement_postings,
    evaluate,
    find_matches,
    intersect_postings,
    union_postings,
)


class TestStrategyParse(unittest.TestCase):
    def test_parse_is_case_and_space_insensitive(self):
        self.assertIs(Strategy.parse("ALL"), Strategy.ALL)
        self.assertIs(Strategy.parse(" any "), Strategy.ANY)
        self.assertIs(Strategy.parse("None"), Strategy.NONE)

    def test_parse_rejects_unknown(self):
        with self.assertRaises(InvalidStrategyError):
            Strategy.parse("SOME")
        with self.assertRaises(ValueError):
            Strategy.parse("")


class TestPostingsOperations(unittest.TestCase):
    def test_intersect_keeps_first_list_order(self):
        self.assertEqual(intersect_postings([[4, 1, 3], [3, 4]]), [4, 3])
        self.assertEqual(intersect_postings([[1, 2]]), [1, 2])
        self.assertEqual(intersect_postings([]), [])
        self.assertEqual(intersect_postings([[1], [2], [1]]), [])

    def test_union_left_to_right_without_duplicates(self):
        self.assertEqual(union_postings([[2, 0], [1, 2], [3]]), [2, 0, 1, 3])
        self.assertEqual(union_postings([]), [])

    def test_complement_is_ascending(self):
        self.assertEqual(complement_postings([3, 0], 5), [1, 2, 4])
        self.assertEqual(complement_postings([], 0), [])


class TestEvaluate(unittest.TestCase):
    def setUp(self):
        self.index = InvertedIndex(["Anna anna Lee", "Lee Park", "Kim"])

    def test_find_matches_drops_unknown_tokens_and_duplicates(self):
        self.assertEqual(
            find_matches(["zzz", "anna", "lee"], self.index), [[0], [0, 1]]
        )

    def test_duplicate_postings_do_not_duplicate_results(self):
        count = self.index.record_count
        self.assertEqual(evaluate(Strategy.ALL, ["anna"], self.index, count), [0])
        self.assertEqual(evaluate(Strategy.ANY, ["anna", "lee"], self.index, count), [0, 1])
        self.assertEqual(evaluate(Strategy.NONE, ["anna"], self.index, count), [1, 2])

    def test_evaluate_rejects_non_strategy(self):
        with self.assertRaises(InvalidStrategyError):
            evaluate("ALL", ["anna"], self.index, self.index.record_count)


class TestSearchService(unittest.TestCase):
    def setUp(self):
        self.service = SearchService.from_records(["Alice Smith", "Bob Jones", "Alice Jones"])

    def test_any_single_token(self):
        self.assertEqual(
            self.service.find("alice", Strategy.ANY), ["Alice Smith", "Alice Jones"]
        )

    def test_all_requires_every_token(self):
        self.assertEqual(self.service.find("alice jones", Strategy.ALL), ["Alice Jones"])

    def test_none_returns_records_without_token(self):
        self.assertEqual(self.service.find("alice", Strategy.NONE), ["Bob Jones"])

    def test_empty_records(self):
        service = SearchService.from_records([])
        for strategy in Strategy:
            self.assertEqual(service.find("alice", strategy), [])
            self.assertEqual(service.find("", strategy), [])

    def test_all_with_only_unknown_tokens_is_empty(self):
        self.assertEqual(self.service.find("carol", Strategy.ALL), [])
        self.assertEqual(self.service.find("carol dave", Strategy.ALL), [])

    def test_all_ignores_unknown_token_next_to_known_ones(self):
        self.assertEqual(
            self.service.find("alice carol", Strategy.ALL), ["Alice Smith", "Alice Jones"]
        )
        self.assertEqual(self.service.find("ALICE carol JONES", Strategy.ALL), ["Alice Jones"])

    def test_none_with_empty_query_returns_everything(self):
        self.assertEqual(
            self.service.find("   ", Strategy.NONE), ["Alice Smith", "Bob Jones", "Alice Jones"]
        )
        self.assertEqual(self.service.find("", Strategy.ANY), [])
        self.assertEqual(self.service.find("", Strategy.ALL), [])

    def test_query_is_case_insensitive(self):
        self.assertEqual(self.service.find("BOB", Strategy.ANY), ["Bob Jones"])

    def test_strategy_by_name(self):
        self.assertEqual(self.service.find("bob", "any"), ["Bob Jones"])
        with self.assertRaises(InvalidStrategyError):
            self.service.find("bob", "MOST")
        with self.assertRaises(InvalidStrategyError):
            self.service.find("bob", 1)

    def test_all_is_subset_of_any_and_none_is_complement(self):
        queries = ["alice", "alice jones", "bob smith", "jones carol", "", "smith smith"]
        for query in queries:
            all_result = self.service.find(query, Strategy.ALL)
            any_result = self.service.find(query, Strategy.ANY)
            none_result = self.service.find(query, Strategy.NONE)
            self.assertTrue(set(all_result) <= set(any_result), query)
            self.assertEqual(len(any_result) + len(none_result), 3, query)
            self.assertFalse(set(any_result) & set(none_result), query)

    def test_none_is_in_record_order(self):
        service = SearchService.from_records(["c x", "b", "a x", "d"])
        self.assertEqual(service.find("x", Strategy.NONE), ["b", "d"])

    def test_repeated_queries_are_identical(self):
        for strategy in Strategy:
            first = self.service.find("jones alice", strategy)
            self.assertEqual(self.service.find("jones alice", strategy), first)


if __name__ == "__main__":
    unittest.main()
