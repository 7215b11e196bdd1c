"""
Flatten a ProductRecord into the marketplace product import CSV.

One main row carries the full product; every size after the first and every
color after the first gets its own variant row sharing the product handle.
"""
from __future__ import annotations

import csv
import io
from typing import Dict, List

from ..logger import get_logger
from ..models import ProductRecord
from ..utils.text_cleaning import slugify

logger = get_logger(__name__)

CSV_COLUMNS = [
    "Title",
    "Handle",
    "Body (HTML)",
    "Vendor",
    "Product Category",
    "Type",
    "Tags",
    "Published",
    "Status",
    "SKU",
    "Barcode",
    "Option1 Name",
    "Option1 Value",
    "Option2 Name",
    "Option2 Value",
    "Option3 Name",
    "Option3 Value",
    "Price",
    "Inventory policy",
    "Inventory quantity",
    "Requires shipping",
    "Weight",
    "Weight unit",
    "Image Src",
    "Image Position",
    "Image alt text",
    "Variant Image",
    "SEO Title",
    "SEO Description",
]

PRODUCT_CATEGORY = "Apparel & Accessories > Clothing"
PRODUCT_TYPE = "Clothing"
SIZE_OPTION = "Size"
COLOR_OPTION = "Color"
INVENTORY_POLICY = "deny"
INVENTORY_QUANTITY = "100"
WEIGHT = "500"
WEIGHT_UNIT = "g"
SEO_DESCRIPTION_LIMIT = 320

# Columns every variant row copies from the main row
SHARED_COLUMNS = [
    "Body (HTML)",
    "Vendor",
    "Product Category",
    "Type",
    "Tags",
    "Published",
    "Status",
    "Weight",
    "Weight unit",
]

CsvRow = Dict[str, str]


def build_handle(title: str) -> str:
    """URL handle shared by all rows of a product."""
    return slugify(title)


def _double_quotes(text: str) -> str:
    return text.replace('"', '""')


def build_body_html(attributes: Dict[str, str]) -> str:
    lines = [f"<strong>{key}:</strong> {value}" for key, value in attributes.items()]
    return _double_quotes("<br>".join(lines))


def build_seo_description(attributes: Dict[str, str]) -> str:
    text = ". ".join(f"{key}: {value}" for key, value in attributes.items())
    return _double_quotes(text[:SEO_DESCRIPTION_LIMIT])


def _empty_row() -> CsvRow:
    return {column: "" for column in CSV_COLUMNS}


def _variant_row(main: CsvRow, handle: str, price: str) -> CsvRow:
    row = _empty_row()
    row["Handle"] = handle
    for column in SHARED_COLUMNS:
        row[column] = main[column]
    row.update({
        "Price": price,
        "Inventory policy": INVENTORY_POLICY,
        "Inventory quantity": INVENTORY_QUANTITY,
        "Requires shipping": "TRUE",
    })
    return row


def build_rows(product: ProductRecord) -> List[CsvRow]:
    """
    Expand a product into its CSV rows.

    Args:
        product: Product to export

    Returns:
        Main row, then one row per extra size, then one row per extra color;
        every row has every column in CSV_COLUMNS
    """
    handle = build_handle(product.title)
    sizes = product.variants.sizes
    colors = product.variants.colors
    first_image = product.images[0] if product.images else ""

    main = _empty_row()
    main.update({
        "Title": product.title,
        "Handle": handle,
        "Body (HTML)": build_body_html(product.attributes),
        "Vendor": product.brand or "",
        "Product Category": PRODUCT_CATEGORY,
        "Type": PRODUCT_TYPE,
        "Tags": ",".join(product.categories),
        "Published": "TRUE",
        "Status": "active",
        "SKU": f"{handle}-1",
        "Option1 Name": SIZE_OPTION if sizes else "",
        "Option1 Value": sizes[0] if sizes else "",
        "Option2 Name": COLOR_OPTION if colors else "",
        "Option2 Value": colors[0] if colors else "",
        "Price": product.price,
        "Inventory policy": INVENTORY_POLICY,
        "Inventory quantity": INVENTORY_QUANTITY,
        "Requires shipping": "TRUE",
        "Weight": WEIGHT,
        "Weight unit": WEIGHT_UNIT,
        "Image Src": first_image,
        "Image Position": "1",
        "Image alt text": product.title,
        "SEO Title": product.title,
        "SEO Description": build_seo_description(product.attributes),
    })

    rows = [main]

    for i in range(1, len(sizes)):
        row = _variant_row(main, handle, product.price)
        row.update({
            "Option1 Name": SIZE_OPTION,
            "Option1 Value": sizes[i],
            "Option2 Name": main["Option2 Name"],
            "Option2 Value": main["Option2 Value"],
            "SKU": f"{handle}-size-{i}",
        })
        rows.append(row)

    for i in range(1, len(colors)):
        variant_image = product.images[i] if i < len(product.images) else first_image
        row = _variant_row(main, handle, product.price)
        row.update({
            "Option1 Name": main["Option1 Name"],
            "Option1 Value": main["Option1 Value"],
            "Option2 Name": COLOR_OPTION,
            "Option2 Value": colors[i],
            "SKU": f"{handle}-color-{i}",
            "Image Src": variant_image,
            "Image Position": str(i + 1),
            "Variant Image": variant_image,
        })
        rows.append(row)

    logger.debug("EXPORT %s: %d rows", handle, len(rows))
    return rows


def export_csv(product: ProductRecord) -> str:
    """
    Render a product as import CSV text, header row first.

    Args:
        product: Product to export

    Returns:
        CSV content
    """
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_COLUMNS, restval="")
    writer.writeheader()
    writer.writerows(build_rows(product))
    return output.getvalue()
