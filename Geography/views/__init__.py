from .country_views import (
    country_list,
    country_options,
    country_detail
)
from .province_views import (
    province_list,
    province_options,
    country_provinces,
    province_detail
)
from .city_views import (
    city_list,
    city_options,
    province_cities,
    city_detail
)
from .district_views import (
    district_list,
    district_options,
    city_districts,
    district_detail
)
from .village_views import (
    village_list,
    village_options,
    district_villages,
    village_detail
)
