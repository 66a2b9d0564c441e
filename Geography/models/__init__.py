from .country import Country
from .province import Province
from .city import City
from .district import District
from .village import Village

__all__ = [
    'Country',
    'Province',
    'City',
    'District',
    'Village',
]
