from config import EXCEPTION_LINE


def map_line_names(subway_map, line):
    """Record `line.status` under every line id contained in `line.name`."""
    if line.name == EXCEPTION_LINE:
        subway_map[line.name] = line.status
        return

    for line_id in line.name:
        subway_map[line_id] = line.status


def get_data_by_subway_line(service):
    # Feed order matters: a line id listed twice keeps the last status
    subway_map = {}
    for line in service.lines:
        map_line_names(subway_map, line)
    return subway_map


def get_latest_update_time(service):
    return service.timestamp
