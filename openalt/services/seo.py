"""
SEO metadata and schema.org structured data.

Builds page meta-tag sets and JSON-LD objects (WebPage, Article,
SoftwareApplication, BreadcrumbList, FAQPage) for embedding in page markup.
"""

from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from ..config import get_settings
from ..models.alternative import AlternativeRecord
from ..models.category import CategoryRecord
from ..models.software import ProprietarySoftwareRecord

SCHEMA_CONTEXT = "https://schema.org"


class SEOData(BaseModel):
    """Semantic description of a page."""
    title: str
    description: str
    keywords: Optional[str] = None
    og_image: Optional[str] = None
    canonical: Optional[str] = None
    type: Literal["website", "article", "product"] = "website"
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[List[str]] = None


def describe_page(data: SEOData) -> Dict[str, Any]:
    """Meta-tag set for a page, with site defaults for omitted fields."""
    settings = get_settings()
    return {
        "title": data.title,
        "description": data.description,
        "keywords": data.keywords or settings.default_keywords,
        "ogImage": data.og_image or settings.default_og_image,
        "canonical": data.canonical,
        "type": data.type,
        "publishedTime": data.published_time,
        "modifiedTime": data.modified_time,
        "author": data.author,
        "tags": data.tags,
    }


def _alternative_fields(alternative: Union[AlternativeRecord, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(alternative, BaseModel):
        return alternative.model_dump(by_alias=True)
    return dict(alternative)


def build_structured_data(
    data: SEOData,
    extra: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Schema.org object for a page.

    extra["alternative"] (a record or a camelCase mapping) turns the page into
    a SoftwareApplication; otherwise the page is an Article or a WebPage
    depending on data.type. extra["category"] overrides the alternative's
    applicationCategory with a display name.
    """
    settings = get_settings()
    base = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article" if data.type == "article" else "WebPage",
        "headline": data.title,
        "description": data.description,
        "url": data.canonical,
        "author": {
            "@type": "Organization",
            "name": data.author or settings.site_name,
        },
        "publisher": {
            "@type": "Organization",
            "name": settings.site_name,
            "logo": {
                "@type": "ImageObject",
                "url": settings.publisher_logo_url,
            },
        },
    }

    if extra and extra.get("alternative"):
        alternative = _alternative_fields(extra["alternative"])
        platforms = alternative.get("platforms") or []
        return {
            **base,
            "@type": "SoftwareApplication",
            "name": alternative.get("name"),
            "description": alternative.get("description"),
            "url": alternative.get("website"),
            "applicationCategory": (
                extra.get("category")
                or alternative.get("category")
                or alternative.get("categoryId")
            ),
            "operatingSystem": ", ".join(
                p["name"] if isinstance(p, Mapping) else str(p) for p in platforms
            ),
            "license": alternative.get("license"),
            "aggregateRating": {
                "@type": "AggregateRating",
                "ratingValue": alternative.get("rating"),
                "reviewCount": alternative.get("reviewCount"),
            },
        }

    if data.type == "article":
        return {
            **base,
            "datePublished": data.published_time,
            "dateModified": data.modified_time,
            "keywords": ", ".join(data.tags) if data.tags else None,
        }

    return base


def build_breadcrumb_structured_data(items: Sequence[Tuple[str, str]]) -> Dict[str, Any]:
    """BreadcrumbList from ordered (name, url) pairs."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": i + 1,
                "name": name,
                "item": url,
            }
            for i, (name, url) in enumerate(items)
        ],
    }


def build_faq_structured_data(faqs: Sequence[Tuple[str, str]]) -> Dict[str, Any]:
    """FAQPage from ordered (question, answer) pairs."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {
                    "@type": "Answer",
                    "text": answer,
                },
            }
            for question, answer in faqs
        ],
    }


def alternative_page_seo(
    alternative: AlternativeRecord,
    category: Optional[CategoryRecord] = None,
    proprietary: Optional[ProprietarySoftwareRecord] = None,
) -> Dict[str, Any]:
    """Meta tags plus every structured-data block for an alternative's page."""
    settings = get_settings()
    site = settings.site_url.rstrip("/")
    page_url = f"{site}/alternatives/{alternative.id}"

    if proprietary:
        title = f"{alternative.name} - Open Source Alternative to {proprietary.name}"
    else:
        title = f"{alternative.name} - Open Source Alternative"

    seo_data = SEOData(
        title=title,
        description=alternative.description,
        canonical=page_url,
        type="product",
        modified_time=alternative.updated_at.isoformat(),
        tags=[alternative.license, *alternative.languages],
    )

    crumbs = [("Home", f"{site}/")]
    if category:
        crumbs.append((category.name, f"{site}/categories/{category.slug}"))
    crumbs.append((alternative.name, page_url))

    platforms = ", ".join(alternative.platform_names) or "no listed platforms"
    faqs = [
        (f"Is {alternative.name} free?",
         f"{alternative.name} is open source under the {alternative.license} license."),
        (f"Which platforms does {alternative.name} support?",
         f"{alternative.name} runs on {platforms}."),
    ]
    if proprietary:
        faqs.append((
            f"Can {alternative.name} replace {proprietary.name}?",
            f"{alternative.name} is listed as an open source alternative to {proprietary.name}.",
        ))

    return {
        "meta": describe_page(seo_data),
        "structuredData": build_structured_data(
            seo_data,
            {"alternative": alternative, "category": category.name if category else None},
        ),
        "breadcrumbs": build_breadcrumb_structured_data(crumbs),
        "faq": build_faq_structured_data(faqs),
    }
