from memshortener.models.short_url_model import ShortURLModel
from memshortener.models.registry_stats_model import RegistryStatsModel


__all__ = [
    'ShortURLModel',
    'RegistryStatsModel',
]
