from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditConfig:
    country: str = "se"
    sitemap_url: str = (
        "https://www.handelsbanken.{country}/tron/public/ui/configurations/v1/sitemap/sitemap"
    )
    css_url: str = "https://www.handelsbanken.{country}/sv/sepu//css/shb/app/style.css"
    base_url: str = "https://www.handelsbanken.{country}/sv/"
    output_dir: str = "result"
    connect_timeout: float = 10.0
    request_timeout: float = 30.0  # per document acquisition
    max_retries: int = 0  # extra attempts beyond the first
    user_agent: str = "selector-usage/0.1"

    @property
    def resolved_sitemap_url(self) -> str:
        return self.sitemap_url.format(country=self.country)

    @property
    def resolved_css_url(self) -> str:
        return self.css_url.format(country=self.country)

    @property
    def resolved_base_url(self) -> str:
        return self.base_url.format(country=self.country)

    @property
    def output_prefix(self) -> str:
        return self.country
