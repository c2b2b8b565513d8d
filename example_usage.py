"""
Example usage of the sort translator without a web server.

Translates a few sorts written with API field names for the Person model
and prints the resulting property paths and pymongo sort keys.
"""

from sort_translator import Direction, NullHandling, Order, Sort, SortTranslator
from sort_translator.adapters.elasticsearch import ESSortRenderer
from sort_translator.adapters.mongodb import MongoSortRenderer
from sort_translator.schema import PydanticMappingProvider, PydanticMetadataProvider

from example_models import Person


def main():
    metadata_provider = PydanticMetadataProvider([Person])
    mapping_provider = PydanticMappingProvider(metadata_provider)
    translator = SortTranslator(metadata_provider, mapping_provider)
    root_entity = metadata_provider.get_persistent_entity(Person)

    examples = [
        Sort.by(Order.asc("userProfile_displayName")),
        Sort.by(Order.desc("address.streetName"), Order.asc("last")),
        Sort.by(Order(property="birthDate", null_handling=NullHandling.NULLS_LAST)),
        Sort.by_properties(Direction.ASC, "owner.username"),
    ]

    mongo = MongoSortRenderer()
    elastic = ESSortRenderer()

    for sort in examples:
        translated = translator.translate_sort(sort, root_entity)
        print(f"\nRequested:  {[order.property for order in sort]}")
        if translated is None:
            print("Translated: <no sort>")
            continue
        print(f"Translated: {[order.property for order in translated]}")
        print(f"pymongo:    {mongo.render(translated)}")
        print(f"ES:         {elastic.render(translated)}")


if __name__ == "__main__":
    main()
