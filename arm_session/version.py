"""ARM Session Meta information.
   ARM Session provides the signed-cookie login gate and the encrypted
   credential vault for the Agency Resource Management application.
"""
__title__ = 'arm_session'
__description__ = (
   'Stateless signed-cookie sessions and an AES-GCM credential vault '
   'for the Agency Resource Management application.'
)
__version__ = '0.3.0'
__copyright__ = 'Copyright (c) 2026 Growith Agency'
__author__ = 'Growith Agency'
__author_email__ = 'agencygrowith@gmail.com'
__license__ = 'Apache-2.0'
