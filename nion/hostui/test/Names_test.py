# standard libraries
import logging
import unittest

# third party libraries
# None

# local libraries
from nion.hostui import Names


class TestNameAllocatorClass(unittest.TestCase):

    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_name_combines_prefix_counter_timestamp_and_hint(self):
        names = Names.NameAllocator(clock=lambda: 1234)
        self.assertEqual("__ui_widget_1_1234_header", names.allocate("header"))
        self.assertEqual("__ui_widget_2_1234", names.allocate())

    def test_empty_hint_is_left_off(self):
        names = Names.NameAllocator(prefix="w_", clock=lambda: 7)
        self.assertEqual("w_1_7", names.allocate(""))

    def test_names_are_unique_with_same_hint_and_timestamp(self):
        names = Names.NameAllocator(clock=lambda: 0)
        allocated = [names.allocate("same") for _ in range(500)]
        self.assertEqual(len(allocated), len(set(allocated)))

    def test_names_are_unique_with_real_clock(self):
        names = Names.NameAllocator()
        allocated = [names.allocate(hint) for hint in ["a", None, "b", "a", None] * 50]
        self.assertEqual(len(allocated), len(set(allocated)))

    def test_issued_names_are_recorded_in_order(self):
        names = Names.NameAllocator(clock=lambda: 1)
        first = names.allocate("x")
        second = names.allocate("y")
        self.assertEqual([first, second], names.issued_names)
        self.assertEqual(2, names.counter)

    def test_reset_clears_counter_and_issued_names(self):
        names = Names.NameAllocator(clock=lambda: 1)
        names.allocate()
        names.reset()
        self.assertEqual(0, names.counter)
        self.assertEqual([], names.issued_names)
        self.assertEqual("__ui_widget_1_1", names.allocate())

    def test_independent_allocators_count_separately(self):
        names1 = Names.NameAllocator(clock=lambda: 1)
        names2 = Names.NameAllocator(clock=lambda: 1)
        names1.allocate()
        self.assertEqual("__ui_widget_1_1", names2.allocate())


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
