from enum import Enum


class TruckStatus(str, Enum):
    active = "ACTIVE"
    inactive = "INACTIVE"
    in_shop = "IN_SHOP"
    sold = "SOLD"
