"""Built-in configuration used when ``site.toml`` cannot be loaded."""

from __future__ import annotations

import datetime as dt

from .helpers import _freeze_section
from .models import ConfigDocument


def default_config(*, today: dt.date | None = None) -> ConfigDocument:
    """Return a complete configuration document covering every section.

    Parameters
    ----------
    today : datetime.date, optional
        Date used for ``site.copyright_year``. Defaults to the current local
        date; this is the only value that is not fixed.

    Returns
    -------
    ConfigDocument
        A document in which every section and every key read by the
        templates is populated.
    """
    year = (today or dt.date.today()).year  # noqa: DTZ011 - local calendar year
    return ConfigDocument(
        site=_freeze_section(
            {
                "title": "Portfolio Website",
                "tagline": "Professional Portfolio",
                "description": "A professional portfolio website",
                "domain": "localhost",
                "language": "en",
                "copyright_year": year,
            }
        ),
        owner=_freeze_section(
            {
                "name": "Your Name",
                "full_name": "Your Full Name",
                "profession": "Professional",
                "bio": "Professional bio goes here.",
                "location": "Location",
                "email": "contact@example.com",
            }
        ),
        social=_freeze_section(
            {
                "github": "",
                "linkedin": "",
                "twitter": "",
                "website": "",
                "blog": "",
            }
        ),
        skills=_freeze_section(
            {
                "networking": [],
                "technical": [],
                "certifications": [],
            }
        ),
        theme=_freeze_section(
            {
                "primary_color": "#13B9FD",
                "secondary_color": "#0175C2",
                "dark_background": "#0D1117",
                "card_background": (
                    "linear-gradient(145deg, #1C2128 0%, #22272E 100%)"
                ),
                "border_color": "#30363D",
            }
        ),
        navigation=_freeze_section(
            {
                "show_home": True,
                "show_projects": True,
                "show_blog": True,
                "show_contact": False,
            }
        ),
        features=_freeze_section(
            {
                "show_skills": True,
                "show_certifications": True,
                "show_projects": True,
                "show_blog": True,
                "show_social_links": True,
                "enable_dark_mode": True,
                "enable_animations": True,
            }
        ),
        seo=_freeze_section(
            {
                "keywords": "portfolio, professional",
                "author": "Your Name",
                "robots": "index, follow",
            }
        ),
        contact=_freeze_section(
            {
                "show_contact_form": False,
                "email": "contact@example.com",
                "phone": "",
                "address": "",
            }
        ),
        source=None,
    )


__all__ = ["default_config"]
