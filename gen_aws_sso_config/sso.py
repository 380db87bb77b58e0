"""
Copyright 2016-present Nike, Inc.
Licensed under the Apache License, Version 2.0 (the "License");
You may not use this file except in compliance with the License.
You may obtain a copy of the License at
      http://www.apache.org/licenses/LICENSE-2.0
Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and* limitations under the License.*
"""
import itertools

from .common import Account, Entitlement, Role


class EntitlementEnumerator(object):
    """
       Lists the accounts the SSO access token can see and the roles assigned
       in each of them. Everything is lazy: a page is requested only when the
       consumer gets to it, and each page is requested once.
    """

    def __init__(self, gac_ui, sso_client, policy):
        """
        :type gac_ui: ui.UserInterface
        :param sso_client: boto3 sso client
        :type policy: errors.ErrorPolicy
        """
        self.ui = gac_ui
        self._client = sso_client
        self._policy = policy

    def _iter_pages(self, operation, step, **kwargs):
        # a failed page ends the sequence, the paginator cannot resume without its token
        pages = self._client.get_paginator(operation).paginate(**kwargs)
        with self._policy.guard(step):
            for page in pages:
                yield page

    def iter_accounts(self, access_token):
        for page in self._iter_pages('list_accounts', 'list accounts', accessToken=access_token):
            for account in page.get('accountList', []):
                yield Account(
                    account_id=account.get('accountId', ''),
                    account_name=account.get('accountName', ''),
                )

    def iter_account_roles(self, access_token, account_id):
        step = 'list roles for account {}'.format(account_id)
        for page in self._iter_pages('list_account_roles', step, accessToken=access_token, accountId=account_id):
            for role in page.get('roleList', []):
                yield Role(
                    account_id=role.get('accountId', account_id),
                    role_name=role.get('roleName', ''),
                )

    def _account_entitlements(self, access_token, account):
        for role in self.iter_account_roles(access_token, account.account_id):
            yield Entitlement(
                account_name=account.account_name,
                account_id=role.account_id,
                role_name=role.role_name,
            )

    def iter_entitlements(self, access_token):
        """ Every (account, role) pair, in the order the service returns them """
        return itertools.chain.from_iterable(
            self._account_entitlements(access_token, account)
            for account in self.iter_accounts(access_token)
        )
