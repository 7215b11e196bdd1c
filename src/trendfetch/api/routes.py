"""
API routes for TrendFetch application.
"""
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError, handle_error
from ..logger import get_logger
from ..schemas.requests import CategoryRequest, ExportRequest, ScrapeRequest
from ..services.category_mapping import resolve_category_config
from ..services.csv_exporter import build_handle, export_csv
from ..services.product_scraper import ProductScraper

logger = get_logger(__name__)

# Create blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')

SCRAPER_KEY = 'PRODUCT_SCRAPER'
EXPORT_FILENAME = 'products.csv'


def get_scraper() -> ProductScraper:
    """Get the scraper configured on the running app."""
    return current_app.config[SCRAPER_KEY]


def _validation_message(error: PydanticValidationError) -> str:
    """First pydantic error as a single user facing message."""
    first = error.errors()[0]
    ctx_error = (first.get('ctx') or {}).get('error')
    if ctx_error is not None:
        return str(ctx_error)
    location = '.'.join(str(part) for part in first.get('loc', ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get('msg'))


def _parse(schema, data: Any):
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_validation_message(e)) from e


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error_response(error: Exception) -> tuple[Response, int]:
    result = handle_error(error)
    return jsonify(result.to_dict()), result.status


@api_bp.route('/scrape', methods=['POST'])
def scrape_product() -> tuple[Dict[str, Any], int]:
    """
    Scrape a marketplace product page.

    Repeated requests for the same URL are served from the in-memory cache
    without fetching the page again.

    Expected JSON:
    {
        "url": "https://www.trendyol.com/brand/product-name-p-123456"
    }

    Returns:
    {
        "status": "success",
        "cached": false,
        "data": {...}  // ProductRecord
    }
    """
    try:
        data = _json_body()
        scrape_request = _parse(ScrapeRequest, data)

        logger.info(f"Scraping product: {scrape_request.url}")

        product, cached = get_scraper().scrape_with_status(scrape_request.url)

        logger.info(f"Scrape complete for {product.url}: id={product.id}, cached={cached}")

        return jsonify({
            'status': 'success',
            'cached': cached,
            'data': product.to_dict()
        }), 200

    except Exception as e:
        return _error_response(e)


@api_bp.route('/export', methods=['POST'])
def export_product() -> Any:
    """
    Export a scraped product as a marketplace import CSV.

    Expected JSON:
    {
        "product": {...}  // ProductRecord as returned by /api/scrape
    }

    Returns: CSV file download
    """
    try:
        data = _json_body()
        if not data.get('product'):
            raise ValidationError('Product data is required')

        export_request = _parse(ExportRequest, data)
        product = export_request.product.to_record()

        logger.info(f"Exporting product to CSV: {product.title}")

        csv_content = export_csv(product)

        logger.info(f"CSV export complete for handle: {build_handle(product.title)}")

        return Response(
            csv_content,
            mimetype='text/csv',
            headers={
                'Content-Disposition': f'attachment; filename={EXPORT_FILENAME}',
                'Content-Type': 'text/csv; charset=utf-8'
            }
        )

    except Exception as e:
        return _error_response(e)


@api_bp.route('/category', methods=['POST'])
def resolve_category() -> tuple[Dict[str, Any], int]:
    """
    Resolve the import taxonomy entry for a list of categories.

    Expected JSON:
    {
        "categories": ["Erkek Giyim", "Tişört"]
    }

    Returns:
    {
        "status": "success",
        "data": {...}  // CategoryConfig
    }
    """
    try:
        data = _json_body()
        category_request = _parse(CategoryRequest, data)

        config = resolve_category_config(category_request.categories)

        return jsonify({
            'status': 'success',
            'data': config.to_dict()
        }), 200

    except Exception as e:
        return _error_response(e)
