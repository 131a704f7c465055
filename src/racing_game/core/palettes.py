# Assigned by lane (participant index), wrapping around for large fields.
CAR_COLORS: list[str] = [
    "#FF0000",  # Red
    "#1778ea",  # Blue
    "#3ab71d",  # Green
    "#FFE135",  # Yellow
    "#9370DB",  # Medium Purple
    "#f47e2c",  # Orange
    "#00BFFF",  # Deep Sky Blue
    "#f13597",  # Pink
    "#A52A2A",  # Reddish Brown
    "#5F9EA0",  # Cadet Blue
]


def get_car_color(idx: int) -> str:
    return CAR_COLORS[idx % len(CAR_COLORS)]
