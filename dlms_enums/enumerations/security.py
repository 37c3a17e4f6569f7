from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class Security(DlmsEnum):
    """The security applied to an APDU, as coded in the security control byte."""

    NONE = 0, "NONE"
    AUTHENTICATION = 0x10, "AUTHENTICATION"
    ENCRYPTION = 0x20, "ENCRYPTION"
    AUTHENTICATION_ENCRYPTION = 0x30, "AUTHENTICATIONENCRYPTION"


@CATALOG.register
@unique
class SecurityPolicy(DlmsFlag):
    """
    Security policy of a Security Setup object.

    ``AUTHENTICATED_ENCRYPTED`` is the combination of the two bits below it and
    is kept as an entry of its own since version 0 policies use it.
    """

    NONE = 0, "NONE"
    AUTHENTICATED = 0x1, "AUTHENTICATED"
    ENCRYPTED = 0x2, "ENCRYPTED"
    AUTHENTICATED_ENCRYPTED = 0x3, "AUTHENTICATEDENCRYPTED"
    AUTHENTICATED_REQUEST = 0x4, "AUTHENTICATEDREQUEST"
    ENCRYPTED_REQUEST = 0x8, "ENCRYPTEDREQUEST"
    DIGITALLY_SIGNED_REQUEST = 0x10, "DIGITALLYSIGNEDREQUEST"
    AUTHENTICATED_RESPONSE = 0x20, "AUTHENTICATEDRESPONSE"
    ENCRYPTED_RESPONSE = 0x40, "ENCRYPTEDRESPONSE"
    DIGITALLY_SIGNED_RESPONSE = 0x80, "DIGITALLYSIGNEDRESPONSE"


@CATALOG.register
@unique
class SecuritySuite(DlmsEnum):
    SUITE_0 = 0, "SUITE0"
    SUITE_1 = 1, "SUITE1"
    SUITE_2 = 2, "SUITE2"


@CATALOG.register
@unique
class GlobalKeyType(DlmsEnum):
    UNICAST_ENCRYPTION = 0, "UNICASTENCRYPTION"
    BROADCAST_ENCRYPTION = 1, "BROADCASTENCRYPTION"
    AUTHENTICATION = 2, "AUTHENTICATION"
    KEK = 3, "KEK"


@CATALOG.register
@unique
class DataProtectionIdentifiedKeyType(DlmsEnum):
    UNICAST_ENCRYPTION = 0, "UnicastEncryption"
    BROADCAST_ENCRYPTION = 1, "BroadcastEncryption"


@CATALOG.register
@unique
class KeyAgreementScheme(DlmsEnum):
    EPHEMERAL_UNIFIED_MODEL = 0, "EphemeralUnifiedModel"
    ONE_PASS_DIFFIE_HELLMAN = 1, "OnePassDiffieHellman"
    STATIC_UNIFIED_MODEL = 2, "StaticUnifiedModel"


@CATALOG.register
@unique
class Signing(DlmsEnum):
    NONE = 0, "NONE"
    EPHEMERAL_UNIFIED_MODEL = 1, "EPHEMERALUNIFIEDMODEL"
    ONE_PASS_DIFFIE_HELLMAN = 2, "ONEPASSDIFFIEHELLMAN"
    STATIC_UNIFIED_MODEL = 3, "STATICUNIFIEDMODEL"
    GENERAL_SIGNING = 4, "GENERALSIGNING"


@CATALOG.register
@unique
class SignCipherOrder(DlmsEnum):
    CIPHERED_FIRST = 0, "CIPHEREDFIRST"
    SIGNED_FIRST = 1, "SIGNEDFIRST"


@CATALOG.register
@unique
class CryptoKeyType(DlmsFlag):
    """Kind of key asked for. ``ECDSA`` is the zero value."""

    ECDSA = 0x0, "Ecdsa"
    BLOCK_CIPHER = 0x1, "BlockCipher"
    AUTHENTICATION = 0x2, "Authentication"
    BROADCAST = 0x4, "Broadcast"


@CATALOG.register
@unique
class AlgorithmID(DlmsEnum):
    AES_GCM128 = 0, "AesGcm128"
    AES_GCM256 = 1, "AesGcm256"
    AES_WRAP128 = 2, "AesWrap128"
    AES_WRAP256 = 3, "AesWrap256"


@CATALOG.register
@unique
class Ecc(DlmsEnum):
    P256 = 0, "P256"
    P384 = 1, "P384"


@CATALOG.register
@unique
class RequiredProtection(DlmsFlag):
    AUTHENTICATED_REQUEST = 4, "AuthenticatedRequest"
    ENCRYPTED_REQUEST = 8, "EncryptedRequest"
    DIGITALLY_SIGNED_REQUEST = 16, "DigitallySignedRequest"
    AUTHENTICATED_RESPONSE = 32, "AuthenticatedResponse"
    ENCRYPTED_RESPONSE = 64, "EncryptedResponse"
    DIGITALLY_SIGNED_RESPONSE = 128, "DigitallySignedResponse"


@CATALOG.register
@unique
class ProtectionType(DlmsEnum):
    AUTHENTICATION = 0, "AUTHENTICATION"
    ENCRYPTION = 1, "ENCRYPTION"
    AUTHENTICATION_ENCRYPTION = 2, "AUTHENTICATIONENCRYPTION"
    DIGITAL_SIGNATURE = 3, "DIGITALSIGNATURE"


@CATALOG.register
@unique
class ProtectionMode(DlmsEnum):
    LOCKED = 0, "LOCKED"
    LOCKED_ON_FAILED_ATTEMPTS = 1, "LOCKEDONFAILEDATTEMPTS"
    UNLOCKED = 2, "UNLOCKED"


@CATALOG.register
@unique
class ProtectionStatus(DlmsEnum):
    UNLOCKED = 0, "Unlocked"
    TEMPORARILY_LOCKED = 1, "TemporarilyLocked"
    LOCKED = 2, "Locked"
