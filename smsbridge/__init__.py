"""smsbridge: permission-gated SMS dispatch with bounded retries.

Lets an application front-end hand SMS to a host messaging capability and
receive structured success/failure results asynchronously:
  - Input validation and a permission gate checked on every call
  - Address normalization with a configurable default calling code
  - Bounded, constant-backoff retries through an injected timer
  - Three send variants expressed as dispatch profiles
  - In-memory, console, and Termux:API transports
"""

__version__ = "0.1.0"
__description__ = "Permission-gated SMS dispatch bridge with bounded retries"

from smsbridge.bridge import BridgeRejection, SMSModule, create_module
from smsbridge.core.dispatcher import SmsDispatcher
from smsbridge.models import SendFailure, SendRequest, SendSuccess

__all__ = [
    "SmsDispatcher",
    "SMSModule",
    "BridgeRejection",
    "create_module",
    "SendRequest",
    "SendSuccess",
    "SendFailure",
    "__version__",
]
