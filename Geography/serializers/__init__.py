from .country_serializers import (
    CountryReadSerializer,
    CountryShowSerializer,
    CountryCreateSerializer,
    CountryUpdateSerializer,
    CountryOptionSerializer,
)
from .province_serializers import (
    ProvinceReadSerializer,
    ProvinceShowSerializer,
    ProvinceOptionSerializer,
    ProvinceCreateSerializer,
    ProvinceUpdateSerializer,
)
from .city_serializers import (
    CityReadSerializer,
    CityShowSerializer,
    CityOptionSerializer,
    CityCreateSerializer,
    CityUpdateSerializer,
)
from .district_serializers import (
    DistrictReadSerializer,
    DistrictShowSerializer,
    DistrictOptionSerializer,
    DistrictCreateSerializer,
    DistrictUpdateSerializer,
)
from .village_serializers import (
    VillageReadSerializer,
    VillageOptionSerializer,
    VillageCreateSerializer,
    VillageUpdateSerializer,
)
