"""Identifiers used when handling X.509 certificates and PKCS structures."""

from enum import unique

from dlms_enums.base import DlmsEnum, DlmsFlag
from dlms_enums.catalog import CATALOG


@CATALOG.register
@unique
class CertificateEntity(DlmsEnum):
    SERVER = 0, "Server"
    CLIENT = 1, "Client"
    CERTIFICATION_AUTHORITY = 2, "CertificationAuthority"
    OTHER = 3, "Other"


@CATALOG.register
@unique
class CertificateType(DlmsEnum):
    DIGITAL_SIGNATURE = 0, "DigitalSignature"
    KEY_AGREEMENT = 1, "KeyAgreement"
    TLS = 2, "TLS"
    OTHER = 3, "Other"


@CATALOG.register
@unique
class CertificateIdentificationType(DlmsEnum):
    ENTITY = 0, "ENTITY"
    SERIAL = 1, "SERIAL"


@CATALOG.register
@unique
class CertificateVersion(DlmsEnum):
    VERSION1 = 0, "Version1"
    VERSION2 = 1, "Version2"
    VERSION3 = 2, "Version3"


@CATALOG.register
@unique
class KeyUsage(DlmsFlag):
    NONE = 0, "NONE"
    DIGITAL_SIGNATURE = 0x1, "DIGITALSIGNATURE"
    NON_REPUDIATION = 0x2, "NONREPUDIATION"
    KEY_ENCIPHERMENT = 0x4, "KEYENCIPHERMENT"
    DATA_ENCIPHERMENT = 0x8, "DATAENCIPHERMENT"
    KEY_AGREEMENT = 0x10, "KEYAGREEMENT"
    KEY_CERT_SIGN = 0x20, "KEYCERTSIGN"
    CRL_SIGN = 0x40, "CRLSIGN"
    ENCIPHER_ONLY = 0x80, "ENCIPHERONLY"
    DECIPHER_ONLY = 0x100, "DECIPHERONLY"


@CATALOG.register
@unique
class ExtendedKeyUsage(DlmsEnum):
    NONE = 0, "NONE"
    SERVER_AUTH = 1, "SERVERAUTH"
    CLIENT_AUTH = 2, "CLIENTAUTH"


@CATALOG.register
@unique
class HashAlgorithm(DlmsEnum):
    NONE = 0, "None"
    SHA1_RSA = 1, "Sha1Rsa"
    MD5_RSA = 2, "Md5Rsa"
    SHA1_DSA = 3, "Sha1Dsa"
    SHA1_RSA1 = 4, "Sha1Rsa1"
    SHA_RSA = 5, "ShaRsa"
    MD5_RSA1 = 6, "Md5Rsa1"
    MD2_RSA1 = 7, "Md2Rsa1"
    MD4_RSA = 8, "Md4Rsa"
    MD4_RSA1 = 9, "Md4Rsa1"
    MD4_RSA2 = 10, "Md4Rsa2"
    MD2_RSA = 11, "Md2Rsa"
    SHA1_DSA1 = 12, "Sha1Dsa1"
    DSA_SHA1 = 13, "DsaSha1"
    MOSAIC_UPDATED_SIG = 14, "MosaicUpdatedSig"
    SHA1_NO_SIGN = 15, "Sha1NoSign"
    MD5_NO_SIGN = 16, "Md5NoSign"
    SHA256_NO_SIGN = 17, "Sha256NoSign"
    SHA384_NO_SIGN = 18, "Sha384NoSign"
    SHA512_NO_SIGN = 19, "Sha512NoSign"
    SHA256_RSA = 20, "Sha256Rsa"
    SHA384_RSA = 21, "Sha384Rsa"
    SHA512_RSA = 22, "Sha512Rsa"
    RSA_SSA_PSS = 23, "RsaSsaPss"
    SHA1_WITH_ECDSA = 24, "Sha1withecdsa"
    SHA256_WITH_ECDSA = 25, "Sha256WithEcdsa"
    SHA384_WITH_ECDSA = 26, "Sha384WithEcdsa"
    SHA512_WITH_ECDSA = 27, "Sha512WithEcdsa"
    SPECIFIED_ECDSA = 28, "SpecifiedEcdsa"


@CATALOG.register
@unique
class PkcsType(DlmsEnum):
    NONE = 0, "None"
    PKCS8 = 1, "Pkcs8"
    PKCS10 = 2, "Pkcs10"
    X509_CERTIFICATE = 3, "x509Certificate"


@CATALOG.register
@unique
class PkcsObjectIdentifier(DlmsEnum):
    """PKCS object identifiers, in the order used by the certificate parser."""

    NONE = 0, "NONE"
    RSA_ENCRYPTION = 1, "RSAENCRYPTION"
    MD2_WITH_RSA_ENCRYPTION = 2, "MD2WITHRSAENCRYPTION"
    MD4_WITH_RSA_ENCRYPTION = 3, "MD4WITHRSAENCRYPTION"
    MD5_WITH_RSA_ENCRYPTION = 4, "MD5WITHRSAENCRYPTION"
    SHA1_WITH_RSA_ENCRYPTION = 5, "SHA1WITHRSAENCRYPTION"
    SRSA_OAEP_ENCRYPTION_SET = 6, "SRSAOAEPENCRYPTIONSET"
    ID_RSAES_OAEP = 7, "IDRSAESOAEP"
    ID_MGF1 = 8, "IDMGF1"
    ID_P_SPECIFIED = 9, "IDPSPECIFIED"
    ID_RSASSA_PSS = 10, "IDRSASSAPSS"
    SHA256_WITH_RSA_ENCRYPTION = 11, "SHA256WITHRSAENCRYPTION"
    SHA384_WITH_RSA_ENCRYPTION = 12, "SHA384WITHRSAENCRYPTION"
    SHA512_WITH_RSA_ENCRYPTION = 13, "SHA512WITHRSAENCRYPTION"
    SHA224_WITH_RSA_ENCRYPTION = 14, "SHA224WITHRSAENCRYPTION"
    DH_KEY_AGREE1MENT = 15, "DHKEYAGREE1MENT"
    PBE_WITH_MD2_AND_DES_CBC = 16, "PBEWITHMD2ANDDESCBC"
    PBE_WITH_MD2_AND_RC2_CBC = 17, "PBEWITHMD2ANDRC2CBC"
    PBE_WITH_MD5_AND_DES_CBC = 18, "PBEWITHMD5ANDDESCBC"
    PBE_WITH_MD5_AND_RC2_CBC = 19, "PBEWITHMD5ANDRC2CBC"
    PBE_WITH_SHA1_AND_DES_CBC = 20, "PBEWITHSHA1ANDDESCBC"
    PBE_WITH_SHA1_AND_RC2_CBC = 21, "PBEWITHSHA1ANDRC2CBC"
    ID_PBE_S2 = 22, "IDPBES2"
    ID_PBKDF2 = 23, "IDPBKDF2"
    DES_EDE3_CBC = 24, "DESEDE3CBC"
    RC2_CBC = 25, "RC2CBC"
    MD2 = 26, "MD2"
    MD4 = 27, "MD4"
    MD5 = 28, "MD5"
    ID_HMAC_WITH_SHA1 = 29, "IDHMACWITHSHA1"
    ID_HMAC_WITH_SHA224 = 30, "IDHMACWITHSHA224"
    ID_HMAC_WITH_SHA256 = 31, "IDHMACWITHSHA256"
    ID_HMAC_WITH_SHA384 = 32, "IDHMACWITHSHA384"
    ID_HMAC_WITH_SHA512 = 33, "IDHMACWITHSHA512"
    DATA = 34, "DATA"
    SIGNED_DATA = 35, "SIGNEDDATA"
    ENVELOPED_DATA = 36, "ENVELOPEDDATA"
    SIGNED_AND_ENVELOPED_DATA = 37, "SIGNEDANDENVELOPEDDATA"
    DIGESTED_DATA = 38, "DIGESTEDDATA"
    ENCRYPTED_DATA = 39, "ENCRYPTEDDATA"
    PKCS9_AT_EMAIL_ADDRESS = 40, "PKCS9ATEMAILADDRESS"
    PKCS9_AT_UNSTRUCTURED_NAME = 41, "PKCS9ATUNSTRUCTUREDNAME"
    PKCS9_AT_CONTENT_TYPE = 42, "PKCS9ATCONTENTTYPE"
    PKCS9_AT_MESSAGE_DIGEST = 43, "PKCS9ATMESSAGEDIGEST"
    PKCS9_AT_SIGNING_TIME = 44, "PKCS9ATSIGNINGTIME"
    PKCS9_AT_COUNTER_SIGNATURE = 45, "PKCS9ATCOUNTERSIGNATURE"
    PKCS9_AT_CHALLENGE_PASSWORD = 46, "PKCS9ATCHALLENGEPASSWORD"
    PKCS9_AT_UNSTRUCTURED_ADDRESS = 47, "PKCS9ATUNSTRUCTUREDADDRESS"
    PKCS9_AT_EXTENDED_CERTIFICATE_ATTRIBUTES = 48, "PKCS9ATEXTENDEDCERTIFICATEATTRIBUTES"
    PKCS9_AT_SIGNING_DESCRIPTION = 49, "PKCS9ATSIGNINGDESCRIPTION"
    PKCS9_AT_EXTENSION_REQUEST = 50, "PKCS9ATEXTENSIONREQUEST"
    PKCS9_AT_SMIME_CAPABILITIES = 51, "PKCS9ATSMIMECAPABILITIES"
    ID_SMIME = 52, "IDSMIME"
    PKCS9_AT_FRIENDLY_NAME = 53, "PKCS9ATFRIENDLYNAME"
    PKCS9_AT_LOCAL_KEY_ID = 54, "PKCS9ATLOCALKEYID"
    X509_CERTIFICATE = 55, "X509CERTIFICATE"
    SDSI_CERTIFICATE = 56, "SDSICERTIFICATE"
    X509_CRL = 57, "X509CRL"
    ID_ALG = 58, "IDALG"
    ID_ALG_ESDH = 59, "IDALGESDH"
    ID_ALG_CMS3_DES_WRAP = 60, "IDALGCMS3DESWRAP"
    ID_ALG_CMS_RC2_WRAP = 61, "IDALGCMSRC2WRAP"
    ID_ALG_PWRI_KEK = 62, "IDALGPWRIKEK"
    ID_ALG_SSDH = 63, "IDALGSSDH"
    ID_RSA_KEM = 64, "IDRSAKEM"
    PREFER_SIGNED_DATA = 65, "PREFERSIGNEDDATA"
    CANNOT_DECRYPT_ANY = 66, "CANNOTDECRYPTANY"
    SMIME_CAPABILITIES_VERSIONS = 67, "SMIMECAPABILITIESVERSIONS"
    ID_AA_RECEIPT_REQUEST = 68, "IDAARECEIPTREQUEST"
    ID_CT_AUTH_DATA = 69, "IDCTAUTHDATA"
    ID_CT_TST_INFO = 70, "IDCTTSTINFO"
    ID_CT_COMPRESSED_DATA = 71, "IDCTCOMPRESSEDDATA"
    ID_CT_AUTH_ENVELOPED_DATA = 72, "IDCTAUTHENVELOPEDDATA"
    ID_CT_TIMESTAMPED_DATA = 73, "IDCTTIMESTAMPEDDATA"
    ID_CTI_ETS_PROOF_OF_ORIGIN = 74, "IDCTIETSPROOFOFORIGIN"
    ID_CTI_ETS_PROOF_OF_RECEIPT = 75, "IDCTIETSPROOFOFRECEIPT"
    ID_CTI_ETS_PROOF_OF_DELIVERY = 76, "IDCTIETSPROOFOFDELIVERY"
    ID_CTI_ETS_PROOF_OF_SENDER = 77, "IDCTIETSPROOFOFSENDER"
    ID_CTI_ETS_PROOF_OF_APPROVAL = 78, "IDCTIETSPROOFOFAPPROVAL"
    ID_CTI_ETS_PROOF_OF_CREATION = 79, "IDCTIETSPROOFOFCREATION"
    ID_AA_CONTENT_HINT = 80, "IDAACONTENTHINT"
    ID_AA_MSG_SIG_DIGEST = 81, "IDAAMSGSIGDIGEST"
    ID_AA_CONTENT_REFERENCE = 82, "IDAACONTENTREFERENCE"
    ID_AA_ENCRYP_KEY_PREF = 83, "IDAAENCRYPKEYPREF"
    ID_AA_SIGNING_CERTIFICATE = 84, "IDAASIGNINGCERTIFICATE"
    ID_AA_SIGNING_CERTIFICATE_V2 = 85, "IDAASIGNINGCERTIFICATEV2"
    ID_AA_CONTENT_IDENTIFIER = 86, "IDAACONTENTIDENTIFIER"
    ID_AA_SIGNATURE_TIME_STAMP_TOKEN = 87, "IDAASIGNATURETIMESTAMPTOKEN"
    ID_AA_ETS_SIG_POLICY_ID = 88, "IDAAETSSIGPOLICYID"
    ID_AA_ETS_COMMITMENT_TYPE = 89, "IDAAETSCOMMITMENTTYPE"
    ID_AA_ETS_SIGNER_LOCATION = 90, "IDAAETSSIGNERLOCATION"
    ID_AA_ETS_SIGNER_ATTR = 91, "IDAAETSSIGNERATTR"
    ID_AA_ETS_OTHER_SIG_CERT = 92, "IDAAETSOTHERSIGCERT"
    ID_AA_ETS_CONTENT_TIMESTAMP = 93, "IDAAETSCONTENTTIMESTAMP"
    ID_AA_ETS_CERTIFICATE_REFS = 94, "IDAAETSCERTIFICATEREFS"
    ID_AA_ETS_REVOCATION_REFS = 95, "IDAAETSREVOCATIONREFS"
    ID_AA_ETS_CERT_VALUES = 96, "IDAAETSCERTVALUES"
    ID_AA_ETS_REVOCATION_VALUES = 97, "IDAAETSREVOCATIONVALUES"
    ID_AA_ETS_ESC_TIME_STAMP = 98, "IDAAETSESCTIMESTAMP"
    ID_AA_ETS_CERT_CRL_TIMESTAMP = 99, "IDAAETSCERTCRLTIMESTAMP"
    ID_AA_ETS_ARCHIVE_TIMESTAMP = 100, "IDAAETSARCHIVETIMESTAMP"
    ID_SPQ_ETS_URI = 101, "IDSPQETSURI"
    ID_SPQ_ETS_U_NOTICE = 102, "IDSPQETSUNOTICE"
    KEY_BAG = 103, "KEYBAG"
    PKCS8_SHROUDED_KEY_BAG = 104, "PKCS8SHROUDEDKEYBAG"
    CERT_BAG = 105, "CERTBAG"
    CRL_BAG = 106, "CRLBAG"
    SECRET_BAG = 107, "SECRETBAG"
    SAFE_CONTENTS_BAG = 108, "SAFECONTENTSBAG"
    PBE_WITH_SHA_AND128_BIT_RC4 = 109, "PBEWITHSHAAND128BITRC4"
    PBE_WITH_SHA_AND40_BIT_RC4 = 110, "PBEWITHSHAAND40BITRC4"
    PBE_WITH_SHA_AND3_KEY_TRIPLE_DES_CBC = 111, "PBEWITHSHAAND3KEYTRIPLEDESCBC"
    PBE_WITH_SHA_AND2_KEY_TRIPLE_DES_CBC = 112, "PBEWITHSHAAND2KEYTRIPLEDESCBC"
    PBE_WITH_SHA_AND128_BIT_RC2_CBC = 113, "PBEWITHSHAAND128BITRC2CBC"
    PBE_WITH_SHA_AND40_BIT_RC2_CBC = 114, "PBEWITHSHAAND40BITRC2CBC"


@CATALOG.register
@unique
class X509CertificateType(DlmsEnum):
    NONE = 0, "None"
    OLD_AUTHORITY_KEY_IDENTIFIER = 1, "OldAuthorityKeyIdentifier"
    OLD_PRIMARY_KEY_ATTRIBUTES = 2, "OldPrimaryKeyAttributes"
    CERTIFICATE_POLICIES = 3, "CertificatePolicies"
    ORIMARY_KEY_USAGE_RESTRICTION = 4, "OrimaryKeyUsageRestriction"
    SUBJECT_DIRECTORY_ATTRIBUTES = 5, "SubjectDirectoryAttributes"
    SUBJECT_KEY_IDENTIFIER = 6, "SubjectKeyIdentifier"
    KEY_USAGE = 7, "KeyUsage"
    PRIVATE_KEY_USAGE_PERIOD = 8, "PrivateKeyUsagePeriod"
    SUBJECT_ALTERNATIVE_NAME = 9, "SubjectAlternativeName"
    ISSUER_ALTERNATIVE_NAME = 10, "IssuerAlternativeName"
    BASIC_CONSTRAINTS = 11, "BasicConstraints"
    CRL_NUMBER = 12, "CrlNumber"
    REASON_CODE = 13, "ReasonCode"
    HOLD_INSTRUCTION_CODE = 14, "HoldInstructionCode"
    INVALIDITY_DATE = 15, "InvalidityDate"
    DELTA_CRL_INDICATOR = 16, "DeltaCrlIndicator"
    ISSUING_DISTRIBUTION_POINT = 17, "IssuingDistributionPoint"
    CERTIFICATE_ISSUER = 18, "CertificateIssuer"
    NAME_CONSTRAINTS = 19, "NameConstraints"
    CRL_DISTRIBUTION_POINTS = 20, "CrlDistributionPoints"
    CERTIFICATE_POLICIES2 = 21, "CertificatePolicies2"
    POLICY_MAPPINGS = 22, "PolicyMappings"
    AUTHORITY_KEY_IDENTIFIER = 23, "AuthorityKeyIdentifier"
    POLICY_CONSTRAINTS = 24, "PolicyConstraints"
    EXTENDED_KEY_USAGE = 25, "ExtendedKeyUsage"
    FRESHEST_CRL = 26, "FreshestCrl"


@CATALOG.register
@unique
class X509Name(DlmsEnum):
    """Attribute types of an X.509 distinguished name."""

    NONE = 0, "NONE"
    C = 1, "C"
    O = 2, "O"
    OU = 3, "OU"
    T = 4, "T"
    CN = 5, "CN"
    STREET = 6, "STREET"
    SERIAL_NUMBER = 7, "SERIALNUMBER"
    L = 8, "L"
    ST = 9, "ST"
    SUR_NAME = 10, "SURNAME"
    GIVEN_NAME = 11, "GIVENNAME"
    INITIALS = 12, "INITIALS"
    GENERATION = 13, "GENERATION"
    UNIQUE_IDENTIFIER = 14, "UNIQUEIDENTIFIER"
    BUSINESS_CATEGORY = 15, "BUSINESSCATEGORY"
    POSTAL_CODE = 16, "POSTALCODE"
    DN_QUALIFIER = 17, "DNQUALIFIER"
    PSEUDONYM = 18, "PSEUDONYM"
    DATE_OF_BIRTH = 19, "DATEOFBIRTH"
    PLACE_OF_BIRTH = 20, "PLACEOFBIRTH"
    GENDER = 21, "GENDER"
    COUNTRY_OF_CITIZENSHIP = 22, "COUNTRYOFCITIZENSHIP"
    COUNTRY_OF_RESIDENCE = 23, "COUNTRYOFRESIDENCE"
    NAME_AT_BIRTH = 24, "NAMEATBIRTH"
    POSTAL_ADDRESS = 25, "POSTALADDRESS"
    DMD_NAME = 26, "DMDNAME"
    TELEPHONE_NUMBER = 27, "TELEPHONENUMBER"
    NAME = 28, "NAME"
    E = 29, "E"
    DC = 30, "DC"
    UID = 31, "UID"


@CATALOG.register
@unique
class X9ObjectIdentifier(DlmsEnum):
    """ANSI X9 object identifiers."""

    NONE = 0, "NONE"
    ID_FIELD_TYPE = 1, "IDFIELDTYPE"
    PRIME_FIELD = 2, "PRIMEFIELD"
    CHARACTERISTIC_TWO_FIELD = 3, "CHARACTERISTICTWOFIELD"
    GN_BASIS = 4, "GNBASIS"
    TP_BASIS = 5, "TPBASIS"
    PP_BASIS = 6, "PPBASIS"
    EC_DSA_WITH_SHA1 = 7, "ECDSAWITHSHA1"
    ID_EC_PUBLIC_KEY = 8, "IDECPUBLICKEY"
    EC_DSA_WITH_SHA2 = 9, "ECDSAWITHSHA2"
    EC_DSA_WITH_SHA224 = 10, "ECDSAWITHSHA224"
    EC_DSA_WITH_SHA256 = 11, "ECDSAWITHSHA256"
    EC_DSA_WITH_SHA384 = 12, "ECDSAWITHSHA384"
    EC_DSA_WITH_SHA512 = 13, "ECDSAWITHSHA512"
    ELLIPTIC_CURVE = 14, "ELLIPTICCURVE"
    C_TWO_CURVE = 15, "CTWOCURVE"
    C2_PNB163V1 = 16, "C2PNB163V1"
    C2_PNB163V2 = 17, "C2PNB163V2"
    C2_PNB163V3 = 18, "C2PNB163V3"
    C2_PNB176W1 = 19, "C2PNB176W1"
    C2_TNB191V1 = 20, "C2TNB191V1"
    C2_TNB191V2 = 21, "C2TNB191V2"
    C2_TNB191V3 = 22, "C2TNB191V3"
    C2_ONB191V4 = 23, "C2ONB191V4"
    C2_ONB191V5 = 24, "C2ONB191V5"
    C2_PNB208W1 = 25, "C2PNB208W1"
    C2_TNB239V1 = 26, "C2TNB239V1"
    C2_TNB239V2 = 27, "C2TNB239V2"
    C2_TNB239V3 = 28, "C2TNB239V3"
    C2_ONB239V4 = 29, "C2ONB239V4"
    C2_ONB239V5 = 30, "C2ONB239V5"
    C2_PNB272W1 = 31, "C2PNB272W1"
    C2_PNB304W1 = 32, "C2PNB304W1"
    C2_TNB359V1 = 33, "C2TNB359V1"
    C2_PNB368W1 = 34, "C2PNB368W1"
    C2_TNB431R1 = 35, "C2TNB431R1"
    PRIME_CURVE = 36, "PRIMECURVE"
    PRIME192V1 = 37, "PRIME192V1"
    PRIME192V2 = 38, "PRIME192V2"
    PRIME192V3 = 39, "PRIME192V3"
    PRIME239V1 = 40, "PRIME239V1"
    PRIME239V2 = 41, "PRIME239V2"
    PRIME239V3 = 42, "PRIME239V3"
    PRIME256V1 = 43, "PRIME256V1"
    ID_DSA = 44, "IDDSA"
    ID_DSA_WITH_SHA1 = 45, "IDDSAWITHSHA1"
    X9X63_SCHEME = 46, "X9X63SCHEME"
    DH_SINGLE_PASS_STD_DH_SHA1_KDF_SCHEME = 47, "DHSINGLEPASSSTDDHSHA1KDFSCHEME"
    DH_SINGLE_PASS_COFACTOR_DH_SHA1_KDF_SCHEME = 48, "DHSINGLEPASSCOFACTORDHSHA1KDFSCHEME"
    MQV_SINGLE_PASS_SHA1_KDF_SCHEME = 49, "MQVSINGLEPASSSHA1KDFSCHEME"
    ANSI_X9_42 = 50, "ANSI_X9_42"
    DH_PUBLIC_NUMBER = 51, "DHPUBLICNUMBER"
    X9X42_SCHEMES = 52, "X9X42SCHEMES"
    DH_STATIC = 53, "DHSTATIC"
    DH_EPHEM = 54, "DHEPHEM"
    DH_ONE_FLOW = 55, "DHONEFLOW"
    DH_HYBRID1 = 56, "DHHYBRID1"
    DH_HYBRID2 = 57, "DHHYBRID2"
    DH_HYBRID_ONE_FLOW = 58, "DHHYBRIDONEFLOW"
    MQV2 = 59, "MQV2"
    MQV1 = 60, "MQV1"
    SECP384R1 = 61, "SECP384R1"
