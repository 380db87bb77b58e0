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
from .oidc import SSO_REGISTRATION_SCOPES

BANNER = '======== ADD THE FOLLOWING TO YOUR .aws/config FILE ========'


class ConfigEmitter(object):
    """
       Writes AWS config file sections through ui.result, one line at a time,
       so profiles show up as soon as they are discovered.
       Names are written verbatim, nothing is escaped.
    """

    def __init__(self, gac_ui, sso_session_name, sso_region, start_url):
        """
        :type gac_ui: ui.UserInterface
        """
        self.ui = gac_ui
        self.sso_session_name = sso_session_name
        self.sso_region = sso_region
        self.start_url = start_url
        self.profile_count = 0

    def _write(self, lines):
        for line in lines:
            self.ui.result(line)

    def emit_banner(self):
        self._write([BANNER, ''])

    def emit_session(self):
        self._write([
            '# This is the Identity Center portal entry',
            '[sso-session {}]'.format(self.sso_session_name),
            'sso_region = {}'.format(self.sso_region),
            'sso_start_url = {}'.format(self.start_url),
            '# sso_registration_scopes = {}'.format(','.join(SSO_REGISTRATION_SCOPES)),
            '',
        ])

    @staticmethod
    def profile_name(entitlement):
        return '{}-{}'.format(entitlement.account_name, entitlement.role_name)

    def emit_profile(self, entitlement):
        """
        :type entitlement: common.Entitlement
        """
        self._write([
            '[profile {}]'.format(self.profile_name(entitlement)),
            'sso_session = {}'.format(self.sso_session_name),
            'sso_account_id = {}'.format(entitlement.account_id),
            'sso_role_name = {}'.format(entitlement.role_name),
            '# region = {}'.format(self.sso_region),
            '',
        ])
        self.profile_count += 1
