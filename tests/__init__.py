import boto3
from botocore.exceptions import ClientError

REGION = 'us-east-1'
START_URL = 'https://x.awsapps.com/start'
ACCESS_TOKEN = 'aoaAAAAAGZ-access-token-1234'


def make_client(service):
    """A real boto3 client that never needs credentials, meant to be wrapped in a Stubber"""
    return boto3.client(
        service,
        region_name=REGION,
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )


def client_error(operation, code='UnauthorizedException', message='Session token not found or invalid'):
    return ClientError({'Error': {'Code': code, 'Message': message}}, operation)


def register_client_response(client_id='client-id', client_secret='client-secret'):
    return {
        'clientId': client_id,
        'clientSecret': client_secret,
        'clientIdIssuedAt': 1700000000,
        'clientSecretExpiresAt': 1707776000,
    }


def device_authorization_response(device_code='device-code', url='https://device.sso.us-east-1.amazonaws.com/?user_code=ABCD-EFGH'):
    return {
        'deviceCode': device_code,
        'userCode': 'ABCD-EFGH',
        'verificationUri': 'https://device.sso.us-east-1.amazonaws.com/',
        'verificationUriComplete': url,
        'expiresIn': 600,
        'interval': 1,
    }


def create_token_response(access_token=ACCESS_TOKEN):
    return {
        'accessToken': access_token,
        'tokenType': 'Bearer',
        'expiresIn': 28800,
    }


def accounts_page(accounts, next_token=None):
    page = {
        'accountList': [
            {'accountId': account_id, 'accountName': name, 'emailAddress': '{}@example.com'.format(name)}
            for account_id, name in accounts
        ]
    }
    if next_token:
        page['nextToken'] = next_token
    return page


def roles_page(account_id, role_names, next_token=None):
    page = {'roleList': [{'roleName': role_name, 'accountId': account_id} for role_name in role_names]}
    if next_token:
        page['nextToken'] = next_token
    return page


class FakePaginator(object):
    """
    Stands in for a boto3 paginator. pages is a list, or a callable taking the
    paginate() kwargs and returning one. An exception in the list is raised
    when that page is reached, which ends the iteration like botocore does.
    """

    def __init__(self, pages):
        self.pages = pages
        self.calls = []
        self.fetched = 0

    def paginate(self, **kwargs):
        self.calls.append(kwargs)
        pages = self.pages(kwargs) if callable(self.pages) else self.pages
        return self._iter_pages(pages)

    def _iter_pages(self, pages):
        for page in pages:
            self.fetched += 1
            if isinstance(page, Exception):
                raise page
            yield page


class FakeSSOClient(object):
    def __init__(self, accounts_pages, roles_pages):
        self.paginators = {
            'list_accounts': FakePaginator(accounts_pages),
            'list_account_roles': FakePaginator(roles_pages),
        }

    def get_paginator(self, operation):
        return self.paginators[operation]
