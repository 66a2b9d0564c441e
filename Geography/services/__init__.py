from .country_service import CountryService
from .province_service import ProvinceService
from .city_service import CityService
from .district_service import DistrictService
from .village_service import VillageService

__all__ = [
    'CountryService',
    'ProvinceService',
    'CityService',
    'DistrictService',
    'VillageService',
]
