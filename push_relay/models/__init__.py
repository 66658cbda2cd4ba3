from .subscription import Subscription
from .notification import NotificationPayload
