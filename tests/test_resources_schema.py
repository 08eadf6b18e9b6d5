import unittest

from app.schemas.query import Filter
from app.schemas.resources import ObjectMeta, Template
from app.services.resource_filters import default_filter


class ObjectMetaNullFieldsTests(unittest.TestCase):
    def test_null_collections_become_empty(self):
        meta = ObjectMeta.model_validate(
            {"name": "bare", "labels": None, "annotations": None, "ownerReferences": None}
        )
        self.assertEqual(meta.labels, {})
        self.assertEqual(meta.annotations, {})
        self.assertEqual(meta.owner_references, [])

    def test_resource_with_null_labels_is_filtered_normally(self):
        template = Template.model_validate(
            {"metadata": {"name": "bare", "labels": None, "creationTimestamp": "2026-02-26T09:30:00Z"}}
        )
        flt = default_filter()
        self.assertFalse(flt(template, Filter(field="label", value="app")))
        self.assertFalse(flt(template, Filter(field="ownerKind", value="Pipeline")))
        self.assertTrue(flt(template, Filter(field="name", value="ba")))

    def test_naive_timestamp_is_treated_as_utc(self):
        meta = ObjectMeta.model_validate({"creationTimestamp": "2026-02-26T09:30:00"})
        self.assertIsNotNone(meta.creation_timestamp.tzinfo)


if __name__ == "__main__":
    unittest.main()
