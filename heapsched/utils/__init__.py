# Utils package initialisation
# Import commonly used utility modules for easier access
from .platform_utils import get_platform_info
from .json_utils import NumpyJSONEncoder, save_json, load_json
