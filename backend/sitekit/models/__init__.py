from .content import Content, content_tags
from .content_version import ContentVersion
from .category import Category
from .tag import Tag
from .analytics_config import AnalyticsConfig
from .site_verification import SiteVerification
from .custom_script import CustomScript
from .feature_flag import FeatureFlag
from .seo_metadata import SeoMetadata
from .redirect import Redirect
from .json_ld_schema import JsonLdSchema
from .structured_data_template import StructuredDataTemplate
from .navigation_menu import NavigationMenu
from .geo_setting import GeoSetting
from .media import Media
