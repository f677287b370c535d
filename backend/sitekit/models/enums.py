import enum


class ContentType(str, enum.Enum):
    BLOG = "blog"
    PAGE = "page"
    DOCS = "docs"
    CHANGELOG = "changelog"


class ContentStatus(str, enum.Enum):
    DRAFT = "draft"
    REVIEW = "review"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Environment(str, enum.Enum):
    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"
    ALL = "all"


class AnalyticsPlatform(str, enum.Enum):
    GTM = "GTM"
    GA4 = "GA4"
    FACEBOOK_PIXEL = "FACEBOOK_PIXEL"
    PINTEREST_TAG = "PINTEREST_TAG"
    YANDEX_METRICA = "YANDEX_METRICA"
    CUSTOM = "CUSTOM"


class VerificationPlatform(str, enum.Enum):
    GOOGLE = "GOOGLE"
    BING = "BING"
    YANDEX = "YANDEX"
    FACEBOOK = "FACEBOOK"
    PINTEREST = "PINTEREST"


class ScriptPosition(str, enum.Enum):
    HEAD_START = "head-start"
    HEAD_END = "head-end"
    BODY_START = "body-start"
    BODY_END = "body-end"


class MenuLocation(str, enum.Enum):
    HEADER = "header"
    FOOTER = "footer"
    SIDEBAR = "sidebar"
    MOBILE = "mobile"


class RedirectType(enum.IntEnum):
    PERMANENT = 301
    TEMPORARY = 302


class StorageType(str, enum.Enum):
    S3 = "s3"
    LOCAL = "local"


class SchemaType(str, enum.Enum):
    ORGANIZATION = "Organization"
    WEBSITE = "WebSite"
    WEBPAGE = "WebPage"
    BREADCRUMBLIST = "BreadcrumbList"
    ARTICLE = "Article"
    BLOGPOSTING = "BlogPosting"
    NEWSARTICLE = "NewsArticle"
    TECHARTICLE = "TechArticle"
    FAQPAGE = "FAQPage"
    HOWTO = "HowTo"
    LOCALBUSINESS = "LocalBusiness"
    PRODUCT = "Product"
    SERVICE = "Service"
    REVIEW = "Review"
    EVENT = "Event"
    COURSE = "Course"
    VIDEOOBJECT = "VideoObject"
    IMAGEOBJECT = "ImageObject"
    PERSON = "Person"
    JOBPOSTING = "JobPosting"
