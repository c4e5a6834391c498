# blockbuilder/fields.py

from types import SimpleNamespace

from django import forms


class Location:
    """
    A set of location rules scoping a field group, e.g.
    Location.when('block', 'blocks/hero').and_('post_type', '!=', 'page')
    All rules of one Location must match (AND).
    """

    def __init__(self):
        self.rules = []

    @classmethod
    def when(cls, param, operator, value=None):
        return cls().and_(param, operator, value)

    def and_(self, param, operator, value=None):
        # Two-argument form: the operator defaults to equality
        if value is None:
            operator, value = '==', operator
        self.rules.append({'param': param, 'operator': operator, 'value': value})
        return self

    def to_list(self):
        return [dict(rule) for rule in self.rules]

    def matches(self, param, value):
        """True if every rule on `param` is satisfied by `value`."""
        relevant = [rule for rule in self.rules if rule['param'] == param]
        if not relevant:
            return False
        for rule in relevant:
            if rule['operator'] == '==' and rule['value'] != value:
                return False
            if rule['operator'] == '!=' and rule['value'] == value:
                return False
        return True

    def __eq__(self, other):
        return isinstance(other, Location) and self.rules == other.rules

    def __repr__(self):
        return f"Location({self.rules!r})"


def is_field_declaration(item):
    return (
        isinstance(item, (tuple, list))
        and len(item) == 2
        and isinstance(item[0], str)
        and isinstance(item[1], forms.Field)
    )


def build_form_class(title, fields):
    """
    Builds a django Form class out of (name, forms.Field) pairs, keeping
    the declaration order.
    """
    attrs = {name: field for name, field in fields}
    class_name = ''.join(part.capitalize() for part in str(title).split()) or 'Block'
    return type(f"{class_name}FieldsForm", (forms.Form,), attrs)


def get_field_values(block, field_groups=None):
    """
    Resolves the current value of every field declared for the block
    instance `block` (the dict handed to render callbacks).

    Valid values come back cleaned, invalid ones as submitted, and fields
    without data fall back to their initial value.
    """
    if field_groups is None:
        from .registry import field_groups

    data = block.get('data') or {}
    values = {}
    for group in field_groups.for_block(block.get('name', '')):
        form = field_groups.form_class(group)(data=data)
        form.is_valid()
        for name, field in form.fields.items():
            if name not in data:
                values[name] = field.initial
            elif name in form.cleaned_data:
                values[name] = form.cleaned_data[name]
            else:
                values[name] = data[name]
    return values


def get_fields(block, field_groups=None):
    """Same as get_field_values() but with attribute access."""
    return SimpleNamespace(**get_field_values(block, field_groups))
