import unittest

from app.services.resource_compare import default_compare, name_compare
from tests.resource_factories import at, make_template


class DefaultCompareTests(unittest.TestCase):
    def setUp(self):
        self.compare = default_compare()

    def test_later_creation_time_is_greater(self):
        older, newer = make_template("b", created=at(0)), make_template("a", created=at(5))
        self.assertTrue(self.compare(newer, older, "creationTimestamp"))
        self.assertFalse(self.compare(older, newer, "creationTimestamp"))

    def test_equal_creation_time_breaks_tie_by_name(self):
        first, second = make_template("template-a"), make_template("template-b")
        self.assertTrue(self.compare(second, first, "creationTimestamp"))
        self.assertFalse(self.compare(first, second, "creationTimestamp"))
        self.assertFalse(self.compare(first, first, "creationTimestamp"))

    def test_name_field_is_lexicographic(self):
        self.assertTrue(self.compare(make_template("b", created=at(0)), make_template("a", created=at(9)), "name"))
        self.assertFalse(self.compare(make_template("a"), make_template("b"), "name"))

    def test_unknown_field_has_no_ordering(self):
        left, right = make_template("b", created=at(3)), make_template("a")
        self.assertFalse(self.compare(left, right, "status"))
        self.assertFalse(self.compare(right, left, "status"))

    def test_objects_without_metadata_have_no_ordering(self):
        self.assertFalse(self.compare(object(), make_template("a"), "name"))
        self.assertFalse(self.compare(make_template("a"), object(), "name"))


class NameCompareTests(unittest.TestCase):
    def test_orders_names_ascending_for_any_field(self):
        compare = name_compare()
        a, b = make_template("a", created=at(10)), make_template("b")
        for field in ("name", "creationTimestamp", "whatever"):
            with self.subTest(field=field):
                self.assertTrue(compare(a, b, field))
                self.assertFalse(compare(b, a, field))


if __name__ == "__main__":
    unittest.main()
