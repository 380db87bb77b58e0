from collections import namedtuple

ClientRegistration = namedtuple('ClientRegistration', 'client_id, client_secret')
DeviceCode = namedtuple('DeviceCode', 'device_code, verification_uri_complete')

Account = namedtuple('Account', 'account_id, account_name')
Role = namedtuple('Role', 'account_id, role_name')
Entitlement = namedtuple('Entitlement', 'account_name, account_id, role_name')
