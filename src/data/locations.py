"""
Reference sites searched by the nearest-location finder.
Five campuses in Hà Nội; coordinates are WGS84 degrees.
"""

LOCATIONS = [
    {
        "name": "Cơ sở 1",
        "address": "Số 2, ngách 2, ngõ 40 Tạ Quang Bửu, Hai Bà Trưng, Hà Nội",
        "coordinates": {"lat": 21.0022, "lng": 105.8471},
    },
    {
        "name": "Cơ sở 2",
        "address": "Số 20, ngõ 183 Trần Đại Nghĩa, Hai Bà Trưng, Hà Nội",
        "coordinates": {"lat": 21.0018, "lng": 105.8445},
    },
    {
        "name": "Cơ sở 3",
        "address": "Ngõ 85 Xuân Thủy, Cầu Giấy, Hà Nội",
        "coordinates": {"lat": 21.0373, "lng": 105.7827},
    },
    {
        "name": "Cơ sở 4",
        "address": "42C Lý Thường Kiệt, Hoàn Kiếm, Hà Nội",
        "coordinates": {"lat": 21.0250, "lng": 105.8486},
    },
    {
        "name": "Cơ sở 5",
        "address": "62 Nguyễn Chí Thanh, Đống Đa, Hà Nội",
        "coordinates": {"lat": 21.0252, "lng": 105.8091},
    },
]
