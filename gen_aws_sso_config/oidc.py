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
from . import errors, ui
from .common import ClientRegistration, DeviceCode

SSO_REGISTRATION_SCOPES = ['sso:account:access']
DEVICE_CODE_GRANT_TYPE = 'urn:ietf:params:oauth:grant-type:device_code'


def mask_token(token):
    """ Keep only the tail of a bearer token, enough to tell two tokens apart """
    if not token:
        return ''
    return '****' + token[-4:]


class DeviceAuthorization(object):
    """
       The DeviceAuthorization Class performs the OAuth2 device authorization
       grant against the AWS SSO OIDC service and returns an access token
       for the SSO portal APIs.
    """

    def __init__(self, gac_ui, oidc_client, policy, start_url, client_name,
                 open_browser=True, confirm_timeout=None):
        """
        :type gac_ui: ui.UserInterface
        :param oidc_client: boto3 sso-oidc client
        :type policy: errors.ErrorPolicy
        :param start_url: AWS SSO start URL the device is authorized for
        :param client_name: name of the public client to register
        :param open_browser: try to open the verification URL in a browser
        :param confirm_timeout: seconds to wait for the user, None waits forever
        """
        self.ui = gac_ui
        self._client = oidc_client
        self._policy = policy
        self._start_url = start_url
        self._client_name = client_name
        self._open_browser = open_browser
        self._confirm_timeout = confirm_timeout

    def authenticate(self):
        """ Run the whole device flow and return the access token """
        registration = self.register_client()
        device = self.start_device_authorization(registration)
        self.wait_for_user(device)
        access_token = self.create_token(registration, device)
        if access_token:
            self.ui.info('Obtained SSO access token {}'.format(mask_token(access_token)))
        return access_token

    def register_client(self):
        response = {}
        with self._policy.guard('register the OIDC client'):
            response = self._client.register_client(
                clientName=self._client_name,
                clientType='public',
                scopes=SSO_REGISTRATION_SCOPES,
            )
        return ClientRegistration(
            client_id=response.get('clientId', ''),
            client_secret=response.get('clientSecret', ''),
        )

    def start_device_authorization(self, registration):
        response = {}
        with self._policy.guard('start device authorization'):
            response = self._client.start_device_authorization(
                clientId=registration.client_id,
                clientSecret=registration.client_secret,
                startUrl=self._start_url,
            )
        return DeviceCode(
            device_code=response.get('deviceCode', ''),
            verification_uri_complete=response.get('verificationUriComplete', ''),
        )

    def wait_for_user(self, device):
        """ Show the verification URL and block until the user presses ENTER """
        url = device.verification_uri_complete
        self.ui.info('')
        self.ui.info('If browser is not opened automatically, please open link:')
        self.ui.info(url)

        if self._open_browser and url and not self.ui.open_url(url):
            self.ui.warning('Could not open a browser window.')

        try:
            self.ui.input('Press ENTER key once login is done', timeout=self._confirm_timeout)
        except ui.InputTimeout:
            raise errors.ConfirmationTimeout(self._confirm_timeout)
        except EOFError:
            # a closed stdin counts as confirmation
            pass

    def create_token(self, registration, device):
        response = {}
        with self._policy.guard('create the SSO access token'):
            response = self._client.create_token(
                clientId=registration.client_id,
                clientSecret=registration.client_secret,
                grantType=DEVICE_CODE_GRANT_TYPE,
                deviceCode=device.device_code,
            )
        return response.get('accessToken', '')
