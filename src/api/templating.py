from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.core.config import settings
from src.core.reference import NEIGHBORHOODS
from src.models.activity import CATEGORY_PATHS
from src.services.sitemap import activity_path
from src.services.slug import generate_slug

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["slug"] = generate_slug
templates.env.globals.update(
    site_name=settings.site_name,
    neighborhoods=NEIGHBORHOODS,
    category_paths=CATEGORY_PATHS,
    activity_path=activity_path,
)
