#!/usr/bin/env python3
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
# extras
import boto3
import botocore.session
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

# local imports
from . import errors, ui
from .config import Config
from .emitter import ConfigEmitter
from .oidc import DeviceAuthorization
from .sso import EntitlementEnumerator

# every remote call is attempted exactly once
CLIENT_CONFIG = BotoConfig(retries={'total_max_attempts': 1, 'mode': 'standard'})


class GenAwsSsoConfig(object):
    """
       This is a CLI tool that logs in to IAM Identity Center with the OAuth2
       device authorization flow and prints an ~/.aws/config snippet with one
       sso-session section and one profile per account and role assigned to
       the user.

       Usage:
          -h, --help            show this help message and exit
          --start-url START_URL, -u START_URL
                                AWS SSO start URL (required)
          --sso-region SSO_REGION, -r SSO_REGION
                                AWS IdC instance region (required)
          --sso-session-name SSO_SESSION_NAME, -s SSO_SESSION_NAME
                                The sso_session identifier to use in your
                                config file (default: my-sso)
          --strict              Stop on the first AWS error
          --no-browser          Do not open a browser window
          --confirm-timeout SECONDS
                                Stop waiting for ENTER after SECONDS
          --client-name CLIENT_NAME
                                Name of the registered OIDC client
          --version             gen-aws-sso-config version
    """

    def __init__(self, ui=ui.cli):
        """
        :type ui: ui.UserInterface
        """
        self.ui = ui
        self._cache = {}

    def run(self):
        try:
            self._run()
        except errors.GenAwsSsoConfigExitBase as exc:
            exc.handle(self.ui)
        except KeyboardInterrupt:
            errors.Interrupted().handle(self.ui)

    @property
    def config(self):
        if 'config' in self._cache:
            return self._cache['config']
        config = Config(gac_ui=self.ui)
        config.get_args()
        self._cache['config'] = config
        return config

    @property
    def parameters(self):
        """
        :rtype: config.Parameters
        """
        if 'parameters' in self._cache:
            return self._cache['parameters']
        self._cache['parameters'] = parameters = self.config.parameters()
        return parameters

    @property
    def policy(self):
        if 'policy' in self._cache:
            return self._cache['policy']
        self._cache['policy'] = policy = errors.ErrorPolicy(self.ui, strict=self.parameters.strict)
        return policy

    @property
    def session(self):
        if 'session' in self._cache:
            return self._cache['session']
        try:
            session = boto3.session.Session(region_name=self.parameters.sso_region)
        except BotoCoreError as exc:
            self.policy.report('load the AWS configuration', exc)
            session = self._session_without_profile()
        self._cache['session'] = session
        return session

    def _session_without_profile(self):
        """ A session that ignores AWS_PROFILE, the SSO and OIDC calls are unsigned anyway """
        try:
            botocore_session = botocore.session.get_session({'profile': (None, ['', ''], None, None)})
            return boto3.session.Session(botocore_session=botocore_session,
                                         region_name=self.parameters.sso_region)
        except BotoCoreError as exc:
            raise errors.GenAwsSsoConfigError('Unable to load any AWS configuration: {}'.format(exc)) from exc

    def _new_client(self, service):
        return self.session.client(service, region_name=self.parameters.sso_region, config=CLIENT_CONFIG)

    @property
    def oidc_client(self):
        if 'oidc_client' in self._cache:
            return self._cache['oidc_client']
        self._cache['oidc_client'] = client = self._new_client('sso-oidc')
        return client

    @property
    def sso_client(self):
        if 'sso_client' in self._cache:
            return self._cache['sso_client']
        self._cache['sso_client'] = client = self._new_client('sso')
        return client

    @property
    def authenticator(self):
        if 'authenticator' in self._cache:
            return self._cache['authenticator']
        parameters = self.parameters
        self._cache['authenticator'] = authenticator = DeviceAuthorization(
            self.ui,
            self.oidc_client,
            self.policy,
            parameters.start_url,
            parameters.client_name,
            open_browser=parameters.open_browser,
            confirm_timeout=parameters.confirm_timeout,
        )
        return authenticator

    @property
    def enumerator(self):
        if 'enumerator' in self._cache:
            return self._cache['enumerator']
        self._cache['enumerator'] = enumerator = EntitlementEnumerator(self.ui, self.sso_client, self.policy)
        return enumerator

    @property
    def emitter(self):
        if 'emitter' in self._cache:
            return self._cache['emitter']
        parameters = self.parameters
        self._cache['emitter'] = emitter = ConfigEmitter(
            self.ui,
            parameters.sso_session_name,
            parameters.sso_region,
            parameters.start_url,
        )
        return emitter

    @property
    def access_token(self):
        if 'access_token' in self._cache:
            return self._cache['access_token']
        self._cache['access_token'] = access_token = self.authenticator.authenticate()
        return access_token

    def _run(self):
        """ Pulling it all together to make the CLI """
        # argument errors must surface before any network call
        parameters = self.parameters
        access_token = self.access_token

        self.emitter.emit_banner()
        self.emitter.emit_session()
        for entitlement in self.enumerator.iter_entitlements(access_token):
            self.emitter.emit_profile(entitlement)

        self.ui.info('Generated {} profile(s) for sso-session {}'.format(
            self.emitter.profile_count, parameters.sso_session_name))
        if self.policy.reported:
            self.ui.warning('{} error(s) were reported, the config above may be incomplete.'.format(
                len(self.policy.reported)))


def main():
    GenAwsSsoConfig().run()


if __name__ == '__main__':
    main()
