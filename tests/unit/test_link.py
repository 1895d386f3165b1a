"""Tests for robyn_menu/core/link.py - link value object."""

import pytest

from robyn_menu.core.link import Link, merge_attributes, merge_tokens


class TestLinkRender:
    """Test rendering links to anchors."""

    def test_render_plain_link(self):
        """Test a link without attributes."""
        assert Link('/', 'Home').render() == '<a href="/">Home</a>'

    def test_render_with_rels_and_attributes(self):
        """Test rel is rendered before other attributes."""
        link = Link('/products', 'Products', {'class': 'nav-link'}, ('nofollow',))

        assert link.render() == '<a href="/products" rel="nofollow" class="nav-link">Products</a>'

    def test_render_escapes_values(self):
        """Test markup in href, attributes and anchor is escaped."""
        link = Link('/?a=1&b=2', '<b>Shop</b>', {'title': 'Say "hi"'})

        html = link.render()

        assert 'href="/?a=1&amp;b=2"' in html
        assert '&lt;b&gt;Shop&lt;/b&gt;' in html
        assert 'title="Say &#34;hi&#34;"' in html

    def test_rel_attribute_moves_to_rels(self):
        """Test a rel attribute is folded into the rel tokens."""
        link = Link('/', 'Home', {'rel': 'external nofollow'}, ['nofollow'])

        assert link.rels == ('nofollow', 'external')
        assert 'rel' not in link.attributes

    def test_attributes_are_copied(self):
        """Test links never share the caller's attribute dict."""
        attributes = {'class': 'a'}
        link = Link('/', 'Home', attributes)
        attributes['class'] = 'b'

        assert link.get_attribute('class') == 'a'


class TestLinkDerivation:
    """Test immutable attribute updates."""

    def test_with_added_attribute_returns_new_link(self):
        """Test the original link is left unchanged."""
        link = Link('/', 'Home')
        active = link.with_added_attribute('class', 'active')

        assert active is not link
        assert link.attributes == {}
        assert active.get_attribute('class') == 'active'

    def test_class_tokens_append_without_duplicates(self):
        """Test class values are merged as tokens."""
        link = Link('/', 'Home', {'class': 'myclass'})
        link = link.with_added_attribute('class', 'active')
        link = link.with_added_attribute('class', 'active')

        assert link.get_attribute('class') == 'myclass active'

    def test_other_attributes_overwrite(self):
        """Test non-token attributes replace the previous value."""
        link = Link('/', 'Home', {'id': 'first'}).with_added_attribute('id', 'second')

        assert link.get_attribute('id') == 'second'

    def test_rel_addition_updates_rels(self):
        """Test adding rel extends the rel tokens."""
        link = Link('/', 'Home', rels=('nofollow',)).with_added_attribute('rel', 'noopener nofollow')

        assert link.rels == ('nofollow', 'noopener')
        assert link.get_attribute('rel') == 'nofollow noopener'

    def test_with_attributes_replaces_all(self):
        """Test with_attributes drops the old attribute set."""
        link = Link('/', 'Home', {'class': 'a', 'id': 'x'}).with_attributes({'class': 'b'})

        assert link.attributes == {'class': 'b'}

    def test_links_compare_by_value(self):
        """Test equality is structural."""
        assert Link('/', 'Home', {'class': 'a'}) == Link('/', 'Home', {'class': 'a'})

    def test_links_are_unhashable(self):
        """Test a link holding an attribute dict cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Link('/', 'Home', {'class': 'a'}))


class TestTokenHelpers:
    """Test token and attribute merge helpers."""

    @pytest.mark.parametrize("values,expected", [
        (('a b', 'b c'), ['a', 'b', 'c']),
        ((None, 'a'), ['a']),
        ((['a', 'b c'], 'a'), ['a', 'b', 'c']),
        (('', '  '), []),
    ])
    def test_merge_tokens(self, values, expected):
        assert merge_tokens(*values) == expected

    def test_merge_attributes_keeps_old_only_keys(self):
        """Test attributes only on the old side survive the merge."""
        merged = merge_attributes({'class': 'active', 'id': 'x'}, {'class': 'nav-link', 'title': 't'})

        assert merged == {'class': 'active nav-link', 'id': 'x', 'title': 't'}

    def test_merge_attributes_overwrites_plain_values(self):
        assert merge_attributes({'id': 'x'}, {'id': 'y'}) == {'id': 'y'}
