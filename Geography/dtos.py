from dataclasses import dataclass
from typing import Optional


@dataclass
class CountryCreateDTO:
    """DTO for creating a new country"""
    code: str
    name: str
    iso_code: Optional[str] = None
    phone_code: Optional[str] = None


@dataclass
class CountryUpdateDTO:
    """DTO for updating an existing country"""
    country_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    iso_code: Optional[str] = None
    phone_code: Optional[str] = None


@dataclass
class ProvinceCreateDTO:
    """DTO for creating a new province"""
    country_id: int
    code: str
    name: str


@dataclass
class ProvinceUpdateDTO:
    """DTO for updating an existing province"""
    province_id: int  # Primary Key
    country_id: Optional[int] = None
    code: Optional[str] = None
    name: Optional[str] = None


@dataclass
class CityCreateDTO:
    """DTO for creating a new city"""
    province_id: int
    code: str
    name: str


@dataclass
class CityUpdateDTO:
    """DTO for updating an existing city"""
    city_id: int  # Primary Key
    province_id: Optional[int] = None
    code: Optional[str] = None
    name: Optional[str] = None


@dataclass
class DistrictCreateDTO:
    """DTO for creating a new district"""
    city_id: int
    code: str
    name: str


@dataclass
class DistrictUpdateDTO:
    """DTO for updating an existing district"""
    district_id: int  # Primary Key
    city_id: Optional[int] = None
    code: Optional[str] = None
    name: Optional[str] = None


@dataclass
class VillageCreateDTO:
    """DTO for creating a new village"""
    district_id: int
    code: str
    name: str


@dataclass
class VillageUpdateDTO:
    """DTO for updating an existing village"""
    village_id: int  # Primary Key
    district_id: Optional[int] = None
    code: Optional[str] = None
    name: Optional[str] = None
