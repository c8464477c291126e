from budget_core.registry import CategoryRegistry, DEFAULT_ICON, normalize_category_name


def test_normalize_enum_style_names():
    assert normalize_category_name('MEAT_FISH') == 'Meat Fish'
    assert normalize_category_name('FRUIT_AND_VEG') == 'Fruit & Veg'
    assert normalize_category_name('NON_FOOD') == 'Non Food'


def test_normalize_leaves_display_names_alone():
    assert normalize_category_name('Meat & Fish') == 'Meat & Fish'
    assert normalize_category_name('bakery') == 'bakery'
    assert normalize_category_name('Bakery') == 'Bakery'
    assert normalize_category_name('') == ''


def test_lookup_by_key_and_display_name():
    registry = CategoryRegistry({
        'groups': [{
            'name': 'Fresh',
            'icon': 'leaf',
            'color_hex': '#00ff00',
            'categories': [
                {'name': 'MEAT_FISH', 'display_name': 'Meat & Fish', 'color_hex': '#ff0000'},
                {'name': 'BAKERY'},
            ],
        }]
    })

    assert registry.display_name('MEAT_FISH') == 'Meat & Fish'
    assert registry.color_hex('Meat & Fish') == '#ff0000'
    assert registry.color_hex('BAKERY') == '#00ff00'
    assert registry.icon('BAKERY') == 'leaf'
    assert registry.group_for('Bakery') == 'Fresh'
    assert registry.all_sub_categories == ['Meat & Fish', 'Bakery']


def test_unknown_categories_fall_back():
    registry = CategoryRegistry({'groups': []})
    assert registry.display_name('SOME_THING') == 'Some Thing'
    assert registry.icon('x') == DEFAULT_ICON
    assert registry.group_for('x') == 'Other'


def test_default_registry_excludes_non_budgetable():
    registry = CategoryRegistry()
    assert 'Deposits' not in registry.all_sub_categories
    assert 'Meat & Fish' in registry.all_sub_categories


def test_malformed_hierarchy_yields_empty_registry():
    assert CategoryRegistry({'groups': 'nope'}).all_sub_categories == []
