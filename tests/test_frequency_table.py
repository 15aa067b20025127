import unittest

from frequency_table import CharacterStat, FrequencyTable


class TestFrequencyTable(unittest.TestCase):

    def setUp(self):
        self.table = FrequencyTable()
        for c in "abca":
            self.table.update(c)

    def test_new_characters_go_to_the_front(self):
        self.assertEqual([e.character for e in self.table], ["c", "b", "a"])
        self.assertEqual([e.count for e in self.table], [1, 1, 2])

    def test_update_increments_existing_entry_in_place(self):
        self.table.update("b")
        self.assertEqual(self.table.index_of("b"), 1)
        self.assertEqual(self.table.get(1).count, 2)
        self.assertEqual(len(self.table), 3)

    def test_index_of_missing_character(self):
        self.assertEqual(self.table.index_of("z"), -1)
        self.assertNotIn("z", self.table)
        self.assertIn("a", self.table)

    def test_get_out_of_range(self):
        with self.assertRaises(IndexError):
            self.table.get(-1)
        with self.assertRaises(IndexError):
            self.table.get(3)
        with self.assertRaises(IndexError):
            FrequencyTable().first()

    def test_remove_keeps_order(self):
        self.assertTrue(self.table.remove("b"))
        self.assertEqual([e.character for e in self.table], ["c", "a"])
        self.assertFalse(self.table.remove("b"))
        self.assertFalse(FrequencyTable().remove("x"))

    def test_remove_head(self):
        self.assertTrue(self.table.remove("c"))
        self.assertEqual(self.table.first().character, "b")

    def test_to_array_is_a_snapshot(self):
        snapshot = self.table.to_array()
        self.table.update("d")
        self.assertEqual(len(snapshot), 3)
        self.assertEqual(len(self.table.to_array()), 4)
        self.assertEqual(self.table.to_array()[0].character, "d")

    def test_iter_from_position(self):
        self.assertEqual([e.character for e in self.table.iter_from(1)], ["b", "a"])
        self.assertEqual(list(self.table.iter_from(3)), [])
        with self.assertRaises(IndexError):
            self.table.iter_from(4)

    def test_iteration_is_restartable(self):
        first = [e.character for e in self.table]
        second = [e.character for e in self.table]
        self.assertEqual(first, second)

    def test_string_form(self):
        self.assertEqual(str(FrequencyTable()), "()")
        table = FrequencyTable()
        table.add_first("x")
        self.assertEqual(str(table), "((x 1 0.0 0.0))")
        self.assertEqual(str(CharacterStat("a", 1, 0.5, 0.5)), "(a 1 0.5 0.5)")


if __name__ == '__main__':
    unittest.main()
