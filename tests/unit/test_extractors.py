"""
Unit tests for the field extractors.

Covers the strategy order of each extractor:
- Price (schema offer, primary and secondary selectors, markup)
- Categories (schema breadcrumb, DOM breadcrumb, composites, defaults)
- Attributes (first-write-wins across sources)
- Images (schema vs gallery fallback)
- Variants (size filtering and ordering, colors, hasVariant supplements)
"""
import pytest
from decimal import Decimal

from conftest import make_page
from trendfetch.errors import ProductDataError, ScrapingError
from trendfetch.extractors import (
    apply_markup,
    extract_attributes,
    extract_categories,
    extract_images,
    extract_price,
    extract_variants,
    normalize_sizes,
)
from trendfetch.extractors.strategies import run_strategies


class TestRunStrategies:
    """Tests for the ranked strategy helper."""

    def test_returns_first_non_empty(self):
        name, value = run_strategies(
            [("a", lambda: []), ("b", lambda: ["x"]), ("c", lambda: ["y"])],
            label="test",
        )
        assert name == "b"
        assert value == ["x"]

    def test_skips_failing_strategy(self):
        def broken():
            raise KeyError("missing")

        name, value = run_strategies([("broken", broken), ("ok", lambda: "v")], label="test")
        assert (name, value) == ("ok", "v")

    def test_nothing_found(self):
        assert run_strategies([("a", lambda: None), ("b", lambda: "")], label="test") == (None, None)


class TestPriceExtraction:
    """Tests for price extraction and markup."""

    def test_schema_price_of_100_becomes_115(self):
        page = make_page("", {"@type": "Product", "name": "X", "offers": {"price": 100}})
        price = extract_price(page)
        assert price.price == "115.00"
        assert price.base_price == "100"

    def test_schema_price_string_is_kept_as_base(self):
        page = make_page("", {"@type": "Product", "name": "X", "offers": [{"price": "249.90"}]})
        price = extract_price(page)
        assert price.base_price == "249.90"
        assert price.price == "287.39"

    def test_schema_price_wins_over_dom(self):
        page = make_page(
            '<span class="prc-dsc">50 TL</span>',
            {"@type": "Product", "name": "X", "offers": {"price": 100}},
        )
        assert extract_price(page).base_price == "100"

    def test_primary_selector_strips_currency(self):
        page = make_page('<span class="prc-dsc">299,99 TL</span>')
        price = extract_price(page)
        assert price.base_price == "299,99"
        assert price.price == "344.99"

    def test_secondary_selector(self):
        page = make_page('<div class="discounted-price">1.299,00 TL</div>')
        price = extract_price(page)
        assert price.base_price == "1.299,00"
        assert price.price == "1493.85"

    @pytest.mark.parametrize("raw", [float("inf"), float("nan")])
    def test_non_finite_schema_price_falls_through(self, raw):
        page = make_page(
            '<span class="prc-dsc">10 TL</span>',
            {"@type": "Product", "name": "X", "offers": {"price": raw}},
        )
        price = extract_price(page)
        assert price.base_price == "10"
        assert price.price == "11.50"

    def test_missing_price_raises_scraping_error(self):
        page = make_page("<p>no price here</p>")
        with pytest.raises(ScrapingError):
            extract_price(page)

    def test_custom_markup(self):
        page = make_page('<span class="prc-dsc">200 TL</span>')
        assert extract_price(page, markup="1.5").price == "300.00"

    def test_apply_markup_rounds_half_up(self):
        assert apply_markup(Decimal("10.01")) == "11.51"
        assert apply_markup(Decimal("100")) == "115.00"


class TestCategoryExtraction:
    """Tests for category breadcrumb extraction."""

    def test_schema_breadcrumb_excludes_root(self):
        page = make_page("", {
            "@type": "Product",
            "name": "X",
            "breadcrumb": {"itemListElement": [
                {"name": "Trendyol"}, {"name": "Kadın"}, {"item": {"name": "Elbise"}},
            ]},
        })
        assert extract_categories(page) == ["Kadın", "Elbise"]

    def test_breadcrumb_list_block(self):
        page = make_page("", {"@type": "Product", "name": "X"}, {
            "@type": "BreadcrumbList",
            "itemListElement": [{"name": "Trendyol"}, {"name": "Erkek"}, {"name": "Gömlek"}],
        })
        assert extract_categories(page) == ["Erkek", "Gömlek"]

    def test_dom_breadcrumb_skips_separators(self):
        page = make_page(
            '<div class="breadcrumb-wrapper"><span>Trendyol</span><span>></span>'
            '<span>Erkek</span><span>/</span><span>Ayakkabı</span></div>'
        )
        assert extract_categories(page) == ["Erkek", "Ayakkabı"]

    def test_detail_composite(self):
        page = make_page(
            '<div class="brand-name">Nike</div>'
            '<div class="product-category-container"><span>Spor</span></div>'
            '<div class="detail-category-wrapper"><span>Sneaker</span><span>Spor</span></div>'
        )
        assert extract_categories(page) == ["Nike", "Spor", "Sneaker"]

    def test_title_keyword_inference(self):
        page = make_page(
            '<div class="pr-new-br">Kadın Spor Giyim Tayt</div>'
            '<div class="product-type">Tayt</div>'
        )
        assert extract_categories(page) == ["Kadın", "Tayt", "Giyim", "Spor"]

    def test_default_category(self):
        assert extract_categories(make_page("<p>nothing</p>")) == ["Giyim"]


class TestAttributeExtraction:
    """Tests for attribute extraction."""

    def test_schema_properties(self):
        page = make_page("", {
            "@type": "Product",
            "name": "X",
            "additionalProperty": [
                {"name": "Kumaş", "unitText": "Pamuk"},
                {"name": "Kalıp", "value": "Slim Fit"},
            ],
        })
        assert extract_attributes(page) == {"Kumaş": "Pamuk", "Kalıp": "Slim Fit"}

    def test_earlier_source_is_never_overwritten(self):
        page = make_page(
            '<div class="detail-attr-container"><table>'
            '<tr><th>Kumaş</th><td>Polyester</td></tr>'
            '<tr><th>Desen</th><td>Düz</td></tr>'
            '</table></div>',
            {"@type": "Product", "name": "X", "additionalProperty": [{"name": "Kumaş", "unitText": "Pamuk"}]},
        )
        assert extract_attributes(page) == {"Kumaş": "Pamuk", "Desen": "Düz"}

    def test_generic_list_pair_strategies(self):
        page = make_page(
            '<ul class="product-feature-list">'
            '<li><span class="property-label">Kol Boyu</span><span class="property-value">Kısa</span></li>'
            '<li>Yaka Tipi: Polo Yaka</li>'
            '</ul>'
            '<table class="product-details"><tr><td>Ortam</td><td>Günlük</td></tr></table>'
        )
        assert extract_attributes(page) == {
            "Kol Boyu": "Kısa",
            "Yaka Tipi": "Polo Yaka",
            "Ortam": "Günlük",
        }

    def test_canonical_name_from_alternate_label(self):
        page = make_page(
            '<div data-attribute="Origin"><span class="detail-attr-value">TR</span></div>'
        )
        assert extract_attributes(page) == {"Menşei": "TR"}

    def test_grouped_attributes(self):
        page = make_page(
            '<div class="featured-attributes-group">'
            '<div class="featured-attributes-title">Genel</div>'
            '<div class="featured-attributes-item">'
            '<span class="featured-attributes-label">Cep</span>'
            '<span class="featured-attributes-value">Var</span>'
            '</div></div>'
        )
        assert extract_attributes(page) == {"Cep": "Var"}

    def test_no_attributes(self):
        assert extract_attributes(make_page("<p>plain</p>")) == {}


class TestImageExtraction:
    """Tests for image extraction."""

    def test_single_schema_url_becomes_list(self):
        page = make_page("", {"@type": "Product", "name": "X", "image": {"contentUrl": "https://cdn/a.jpg"}})
        assert extract_images(page) == ["https://cdn/a.jpg"]

    def test_plain_image_list(self):
        page = make_page("", {"@type": "Product", "name": "X", "image": ["https://cdn/a.jpg", "https://cdn/b.jpg"]})
        assert extract_images(page) == ["https://cdn/a.jpg", "https://cdn/b.jpg"]

    def test_gallery_fallback_deduplicates(self):
        page = make_page(
            '<img class="detail-section-img" src="https://cdn/main.jpg">'
            '<div class="gallery-modal-content">'
            '<img src="https://cdn/main.jpg"><img src="https://cdn/2.jpg"><img src="https://cdn/3.jpg">'
            '</div>',
            {"@type": "Product", "name": "X"},
        )
        assert extract_images(page) == ["https://cdn/main.jpg", "https://cdn/2.jpg", "https://cdn/3.jpg"]

    def test_no_images_raises_product_data_error(self):
        with pytest.raises(ProductDataError) as exc_info:
            extract_images(make_page("<p>no images</p>", {"@type": "Product", "name": "X"}))
        assert exc_info.value.field == "images"


class TestVariantExtraction:
    """Tests for size and color variant extraction."""

    def test_composite_size_token_is_dropped(self):
        assert normalize_sizes(["S", "M", "L", "XSSMLXL"]) == ["S", "M", "L"]

    def test_sizes_sorted_with_unknown_last(self):
        assert normalize_sizes(["XL", "Standart", "S", "S", "2XL", "42"]) == ["S", "XL", "2XL", "Standart", "42"]

    def test_first_selector_with_sizes_wins(self):
        page = make_page(
            '<div class="sp-itm">L</div><div class="sp-itm so">XL</div><div class="sp-itm">S</div>'
            '<div class="v2-size-value">M</div>'
        )
        assert extract_variants(page).sizes == ["S", "L"]

    def test_selector_with_only_composite_tokens_falls_through(self):
        page = make_page(
            '<div class="sp-itm">XSSMLXL2XL</div>'
            '<div class="v2-size-value">M</div><div class="v2-size-value">XS</div>'
        )
        assert extract_variants(page).sizes == ["XS", "M"]

    def test_colors_deduplicated_in_order(self):
        page = make_page(
            '<span class="slc-txt">Siyah</span><span class="slc-txt">Beyaz</span><span class="slc-txt">Siyah</span>'
        )
        assert extract_variants(page).colors == ["Siyah", "Beyaz"]

    def test_schema_variants_are_appended(self):
        page = make_page(
            '<div class="sp-itm">M</div><span class="slc-txt">Siyah</span>',
            {"@type": "Product", "name": "X", "hasVariant": [
                {"size": "S", "color": "Siyah"},
                {"size": "M", "color": "Lacivert"},
            ]},
        )
        variants = extract_variants(page)
        assert variants.sizes == ["M", "S"]
        assert variants.colors == ["Siyah", "Lacivert"]

    def test_numeric_schema_sizes_are_appended(self):
        page = make_page("", {"@type": "Product", "name": "X", "hasVariant": [
            {"size": 42},
            {"size": 43, "color": "Siyah"},
            {"size": True},
        ]})
        variants = extract_variants(page)
        assert variants.sizes == ["42", "43"]
        assert variants.colors == ["Siyah"]

    def test_no_variants(self):
        variants = extract_variants(make_page("<p>one size</p>"))
        assert variants.sizes == []
        assert variants.colors == []
