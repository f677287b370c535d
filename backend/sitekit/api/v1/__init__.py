from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import contents
from . import taxonomy
from . import analytics
from . import seo
from . import geo
from . import navigation
from . import media
from . import structured_data
