"""Declared command surface of blockstack-cli.

Every command the CLI accepts is listed here, alphabetically. Parameter
order is significant: it is both the positional order and the order of the
canonical argument vector handed to the executor.
"""

from __future__ import annotations

from blockstack_cli.schema.models import CommandRegistry, CommandSpec, ParameterSpec
from blockstack_cli.schema.patterns import (
    ADDRESS_PATTERN,
    ANY_ADDRESS_PATTERN,
    BLOCKSTACK_ID_PATTERN,
    BOOLEAN_PATTERN,
    ID_ADDRESS_PATTERN,
    INT_PATTERN,
    NAME_OR_ID_ADDRESS_PATTERN,
    NAME_PATTERN,
    NAMESPACE_PATTERN,
    PATH_PATTERN,
    PRIVATE_KEY_PATTERN,
    PRIVATE_KEY_PATTERN_ANY,
    PRIVATE_KEY_UNCOMPRESSED_PATTERN,
    PUBLIC_KEY_PATTERN,
    STACKS_ADDRESS_PATTERN,
    SUBDOMAIN_PATTERN,
    TXID_PATTERN,
    UINT_PATTERN,
    URL_PATTERN,
    ZONEFILE_HASH_PATTERN,
)

COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="announce",
        group="Peer Services",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="message_hash", realtype="zonefile_hash", pattern=ZONEFILE_HASH_PATTERN),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Broadcast a message on the blockchain for subscribers to read.  The "
            "MESSAGE_HASH argument must be the hash of a previously-announced zone "
            "file.  The OWNER_KEY used to sign the transaction must correspond to "
            "the Blockstack ID to which other users have already subscribed.  "
            "OWNER_KEY can be a single private key or a serialized multisig private "
            "key bundle.\n"
            "\n"
            "Examples:\n"
            "    $ # Tip: You can obtain the owner key with the get_owner_keys command\n"
            "    $ export OWNER_KEY=\"136ff26efa5db6f06b28f9c8c7a0216a1a52598045162abfe435d13036154a1b01\"\n"
            "    $ blockstack-cli announce 737c631c7c5d911c6617993c21fba731363f1cfe \"$OWNER_KEY\"\n"
            "\n"
            "    $ export OWNER_KEY=\"2,136ff26efa5db6f06b28f9c8c7a0216a1a52598045162abfe435d13036154a1b01,1885cba486a42960499d1f137ef3a475725ceb11f45d74631f9928280196f67401,2418981c7f3a91d4467a65a518e14fafa30e07e6879c11fab7106ea72b49a7cb01\"\n"
            "    $ blockstack-cli announce 737c631c7c5d911c6617993c21fba731363f1cfe \"$OWNER_KEY\"\n"
        ),
    ),
    CommandSpec(
        name="authenticator",
        group="Authentication",
        min_arity=2,
        max_arity=4,
        parameters=(
            ParameterSpec(name="app_gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext", pattern=".+"),
            ParameterSpec(name="profileGaiaHub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="port", realtype="portnum", pattern=UINT_PATTERN),
        ),
        help_text=(
            "Run an authentication endpoint for the set of names owned by the given "
            "backup phrase.  Send applications the given Gaia hub URL on sign-in, so "
            "the application will use it to read/write user data.\n"
            "\n"
            "You can supply your encrypted backup phrase instead of the raw backup "
            "phrase.  If so, then you will be prompted for your password before any "
            "authentication takes place.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export BACKUP_PHRASE=\"oak indicate inside poet please share dinner monitor glow hire source perfect\"\n"
            "    $ export APP_GAIA_HUB=\"https://1.2.3.4\"\n"
            "    $ export PROFILE_GAIA_HUB=\"https://hub.blockstack.org\"\n"
            "    $ blockstack-cli authenticator \"$APP_GAIA_HUB\" \"$BACKUP_PHRASE\" \"$PROFILE_GAIA_HUB\" 8888\n"
            "    Press Ctrl+C to exit\n"
            "    Authentication server started on 8888\n"
        ),
    ),
    CommandSpec(
        name="balance",
        group="Account Management",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="address", realtype="address", pattern=ANY_ADDRESS_PATTERN),
        ),
        help_text=(
            "Query the balance of an account.  Returns the balances of each kind of "
            "token that the account owns.  The balances will be in the *smallest "
            "possible units* of the token (i.e. satoshis for BTC, microStacks for "
            "Stacks, etc.).\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ blockstack-cli balance 16pm276FpJYpm7Dv3GEaRqTVvGPTdceoY4\n"
            "    {\n"
            "      \"BTC\": \"123456\"\n"
            "      \"STACKS\": \"123456\"\n"
            "    }\n"
            "    $ blockstack-cli balance SPZY1V53Z4TVRHHW9Z7SFG8CZNRAG7BD8WJ6SXD0\n"
            "    {\n"
            "      \"BTC\": \"123456\"\n"
            "      \"STACKS\": \"123456\"\n"
            "    }\n"
        ),
    ),
    CommandSpec(
        name="convert_address",
        group="Account Management",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="address", realtype="address", pattern=ANY_ADDRESS_PATTERN),
        ),
        help_text=(
            "Convert a Bitcoin address to a Stacks address and vice versa.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ blockstack-cli convert_address 12qdRgXxgNBNPnDeEChy3fYTbSHQ8nfZfD\n"
            "    {\n"
            "      \"STACKS\": \"SPA2MZWV9N67TBYVWTE0PSSKMJ2F6YXW7CBE6YPW\",\n"
            "      \"BTC\": \"12qdRgXxgNBNPnDeEChy3fYTbSHQ8nfZfD\"\n"
            "    }\n"
            "    $ blockstack-cli convert_address SPA2MZWV9N67TBYVWTE0PSSKMJ2F6YXW7CBE6YPW\n"
            "    {\n"
            "      \"STACKS\": \"SPA2MZWV9N67TBYVWTE0PSSKMJ2F6YXW7CBE6YPW\",\n"
            "      \"BTC\": \"12qdRgXxgNBNPnDeEChy3fYTbSHQ8nfZfD\"\n"
            "    }\n"
        ),
    ),
    CommandSpec(
        name="decrypt_keychain",
        group="Key Management",
        min_arity=1,
        max_arity=2,
        parameters=(
            ParameterSpec(name="encrypted_backup_phrase", realtype="encrypted_backup_phrase", pattern=r"^[^ ]+\Z"),
            ParameterSpec(name="password", realtype="password", pattern=".+"),
        ),
        help_text=(
            "Decrypt an encrypted backup phrase with a password.  Decrypts to a "
            "12-word backup phrase if done correctly.  The password will be prompted "
            "if not given.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ # password is \"asdf\"\n"
            "    $ blockstack-cli decrypt_keychain \"bfMDtOucUGcJXjZo6vkrZWgEzue9fzPsZ7A6Pl4LQuxLI1xsVF0VPgBkMsnSLCmYS5YHh7R3mNtMmX45Bq9sNGPfPsseQMR0fD9XaHi+tBg=\n"
            "    Enter password:\n"
            "    section amount spend resemble spray verify night immune tattoo best emotion parrot"
        ),
    ),
    CommandSpec(
        name="encrypt_keychain",
        group="Key Management",
        min_arity=1,
        max_arity=2,
        parameters=(
            ParameterSpec(name="backup_phrase", realtype="backup_phrase", pattern=".+"),
            ParameterSpec(name="password", realtype="password", pattern=".+"),
        ),
        help_text=(
            "Encrypt a 12-word backup phrase, which can be decrypted later with the "
            "decrypt_backup_phrase command.  The password will be prompted if not "
            "given.\n"
            "\n"
            "Example:\n"
            "\n"
            "     $ # password is \"asdf\"\n"
            "     $ blockstack-cli encrypt_keychain \"section amount spend resemble spray verify night immune tattoo best emotion parrot\"\n"
            "     Enter password:\n"
            "     Enter password again:\n"
            "     M+DnBHYb1fgw4N3oZ+5uTEAua5bAWkgTW/SjmmBhGGbJtjOtqVV+RrLJEJOgT35hBon4WKdGWye2vTdgqDo7+HIobwJwkQtN2YF9g3zPsKk="
        ),
    ),
    CommandSpec(
        name="gaia_dump_bucket",
        group="Gaia",
        min_arity=5,
        max_arity=5,
        parameters=(
            ParameterSpec(name="name_or_id_address", realtype="name_or_id_address", pattern=f"{ID_ADDRESS_PATTERN}|{BLOCKSTACK_ID_PATTERN}"),
            ParameterSpec(name="app_origin", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
            ParameterSpec(name="dump_dir", realtype="path", pattern=PATH_PATTERN),
        ),
        help_text=(
            "Download the contents of a Gaia hub bucket to a given directory.  The "
            "GAIA_HUB argument must correspond to the *write* endpoint of the Gaia "
            "hub -- that is, you should be able to fetch $GAIA_HUB/hub_info.  If "
            "DUMP_DIR does not exist, it will be created.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export BACKUP_PHRASE=\"section amount spend resemble spray verify night immune tattoo best emotion parrot\n"
            "    $ blockstack-cli gaia_dump_bucket hello.id.blockstack https://sample.app https://hub.blockstack.org \"$BACKUP_PHRASE\" ./backups\n"
            "    Download 3 files...\n"
            "    Download hello_world to ./backups/hello_world\n"
            "    Download dir/format to ./backups/dir\\x2fformat\n"
            "    Download /.dotfile to ./backups/\\x2f.dotfile\n"
            "    3\n"
        ),
    ),
    CommandSpec(
        name="gaia_getfile",
        group="Gaia",
        min_arity=3,
        max_arity=6,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
            ParameterSpec(name="app_origin", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="filename", realtype="filename", pattern=".+"),
            ParameterSpec(name="app_private_key", realtype="private_key", pattern=PRIVATE_KEY_UNCOMPRESSED_PATTERN),
            ParameterSpec(name="decrypt", realtype="boolean", pattern=BOOLEAN_PATTERN),
            ParameterSpec(name="verify", realtype="boolean", pattern=BOOLEAN_PATTERN),
        ),
        help_text=(
            "Get a file from another user's Gaia hub.  Prints the file data to "
            "stdout.  If you want to read an encrypted file, and/or verify a signed "
            "file, then you must pass an app private key, and pass 1 for DECRYPT "
            "and/or VERIFY.  If the file is encrypted, and you do not pass an app "
            "private key, then this command downloads the ciphertext.  If the file "
            "is signed, and you want to download its data and its signature, then "
            "you must run this command twice -- once to get the file contents at "
            "FILENAME, and once to get the signature (whose name will be "
            "FILENAME.sig).\n"
            "\n"
            "Note that Gaia is a key-value store, and has no notion of directories.  "
            "Any directory-separator characters like / or \\ in FILENAME will be "
            "treated as string literals.\n"
            "\n"
            "Example without encryption:\n"
            "\n"
            "    $ # Get an unencrypted, unsigned file\n"
            "    $ blockstack-cli gaia_getfile ryan.id http://publik.ykliao.com statuses.json\n"
            "    [{\"id\":0,\"text\":\"Hello, Blockstack!\",\"created_at\":1515786983492}]\n"
            "\n"
            "Example with encryption:\n"
            "\n"
            "    $ # Get an encrypted file without decrypting\n"
            "    $ blockstack-cli gaia_getfile ryan.id https://app.graphitedocs.com documentscollection.json\n"
            "    $ # Get an encrypted file, and decrypt it\n"
            "    $ # Tip: You can obtain the app key with the get_app_keys command\n"
            "    $ export APP_KEY=\"3ac770e8c3d88b1003bf4a0a148ceb920a6172bdade8e0325a1ed1480ab4fb19\"\n"
            "    $ blockstack-cli gaia_getfile ryan.id https://app.graphitedocs.com documentscollection.json \"$APP_KEY\" 1 0\n"
        ),
    ),
    CommandSpec(
        name="gaia_putfile",
        group="Gaia",
        min_arity=4,
        max_arity=6,
        parameters=(
            ParameterSpec(name="gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="app_private_key", realtype="private_key", pattern=PRIVATE_KEY_UNCOMPRESSED_PATTERN),
            ParameterSpec(name="data_path", realtype="path", pattern=".+"),
            ParameterSpec(name="gaia_filename", realtype="filename", pattern=PATH_PATTERN),
            ParameterSpec(name="encrypt", realtype="boolean", pattern=BOOLEAN_PATTERN),
            ParameterSpec(name="sign", realtype="boolean", pattern=BOOLEAN_PATTERN),
        ),
        help_text=(
            "Put a file into a given Gaia hub, authenticating with the given app "
            "private key.  Optionally encrypt and/or sign the data with the given "
            "app private key."
        ),
    ),
    CommandSpec(
        name="gaia_listfiles",
        group="Gaia",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="app_private_key", realtype="private_key", pattern=PRIVATE_KEY_UNCOMPRESSED_PATTERN),
        ),
        help_text=(
            "List all the files in a Gaia hub, authenticating with the given app "
            "private key."
        ),
    ),
    CommandSpec(
        name="gaia_restore_bucket",
        group="Gaia",
        min_arity=5,
        max_arity=5,
        parameters=(
            ParameterSpec(name="name_or_id_address", realtype="name_or_id_address", pattern=f"{ID_ADDRESS_PATTERN}|{BLOCKSTACK_ID_PATTERN}"),
            ParameterSpec(name="app_origin", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
            ParameterSpec(name="dump_dir", realtype="path", pattern=PATH_PATTERN),
        ),
        help_text=(
            "Upload the contents of a previously-dumped Gaia bucket to a new Gaia "
            "hub.  The GAIA_HUB argument must correspond to the *write* endpoint of "
            "the Gaia hub -- that is, you should be able to fetch "
            "$GAIA_HUB/hub_info.  DUMP_DIR must contain the file contents created by "
            "a previous successful run of the gaia_dump_bucket command, and both "
            "NAME_OR_ID_ADDRESS and APP_ORIGIN must be the same as they were when it "
            "was run.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export BACKUP_PHRASE=\"section amount spend resemble spray verify night immune tattoo best emotion parrot\"\n"
            "    $ blockstack-cli gaia_restore_bucket hello.id.blockstack https://sample.app https://new.gaia.hub \"$BACKUP_PHRASE\" ./backups\n"
            "    Uploaded ./backups/hello_world to https://new.gaia.hub/hub/1Lr8ggSgdmfcb4764woYutUfFqQMjEoKHc/hello_world\n"
            "    Uploaded ./backups/dir\\x2fformat to https://new.gaia.hub/hub/1Lr8ggSgdmfcb4764woYutUfFqQMjEoKHc/dir/format\n"
            "    Uploaded ./backups/\\x2f.dotfile to https://new.gaia.hub/hub/1Lr8ggSgdmfcb4764woYutUfFqQMjEoKHc//.dotfile\n"
            "    3\n"
        ),
    ),
    CommandSpec(
        name="gaia_sethub",
        group="Gaia",
        min_arity=5,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
            ParameterSpec(name="owner_gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="app_origin", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="app_gaia_hub", realtype="url", pattern=URL_PATTERN),
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
        ),
        help_text="Set the Gaia hub for a particular application for a Blockstack ID.",
    ),
    CommandSpec(
        name="get_account_history",
        group="Account Management",
        min_arity=4,
        max_arity=4,
        parameters=(
            ParameterSpec(name="address", realtype="address", pattern=STACKS_ADDRESS_PATTERN),
            ParameterSpec(name="startblock", realtype="integer", pattern=UINT_PATTERN),
            ParameterSpec(name="endblock", realtype="integer", pattern=UINT_PATTERN),
            ParameterSpec(name="page", realtype="integer", pattern=UINT_PATTERN),
        ),
        help_text=(
            "Query the history of account debits and credits over a given block "
            "range.  Returns the history one page at a time.  An empty result "
            "indicates that the page number has exceeded the number of historic "
            "operations in the given block range."
        ),
    ),
    CommandSpec(
        name="get_account_at",
        group="Account Management",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="address", realtype="address", pattern=STACKS_ADDRESS_PATTERN),
            ParameterSpec(name="blocknumber", realtype="integer", pattern=UINT_PATTERN),
        ),
        help_text=(
            "Query the list of token debits and credits on a given address that "
            "occurred at a particular block height.  Does not include BTC debits and "
            "credits."
        ),
    ),
    CommandSpec(
        name="get_address",
        group="Key Management",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="private_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Get the address of a private key or multisig private key bundle.  Gives "
            "the BTC and STACKS addresses\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ blockstack-cli get_address f5185b9ca93bdcb5753fded3b097dab8547a8b47d2be578412d0687a9a0184cb01\n"
            "    {\n"
            "      \"BTC\": \"1JFhWyVPpZQjbPcXFtpGtTmU22u4fhBVmq\",\n"
            "      \"STACKS\": \"SP2YM3J4KQK09V670TD6ZZ1XYNYCNGCWCVVKSDFWQ\"\n"
            "    }\n"
            "    $ blockstack-cli get_address 1,f5185b9ca93bdcb5753fded3b097dab8547a8b47d2be578412d0687a9a0184cb01,ff2ff4f4e7f8a1979ffad4fc869def1657fd5d48fc9cf40c1924725ead60942c01\n"
            "    {\n"
            "      \"BTC\": \"363pKBhc5ipDws1k5181KFf6RSxhBZ7e3p\",\n"
            "      \"STACKS\": \"SMQWZ30EXVG6XEC1K4QTDP16C1CAWSK1JSWMS0QN\"\n"
            "    }"
        ),
    ),
    CommandSpec(
        name="get_blockchain_record",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
        ),
        help_text=(
            "Get the low-level blockchain-hosted state for a Blockstack ID.  This "
            "command is used mainly for debugging and diagnostics.  You should not "
            "rely on it to be stable."
        ),
    ),
    CommandSpec(
        name="get_blockchain_history",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
        ),
        help_text=(
            "Get the low-level blockchain-hosted history of operations on a "
            "Blocktack ID.  This command is used mainly for debugging and "
            "diagnostics, and is not guaranteed to be stable across releases."
        ),
    ),
    CommandSpec(
        name="get_confirmations",
        group="Peer Services",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="txid", realtype="transaction_id", pattern=TXID_PATTERN),
        ),
        help_text="Get the number of confirmations for a transaction.",
    ),
    CommandSpec(
        name="get_namespace_blockchain_record",
        group="Namespace Operations",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="namespace_id", realtype="namespace_id", pattern=NAMESPACE_PATTERN),
        ),
        help_text=(
            "Get the low-level blockchain-hosted state for a Blockstack namespace.  "
            "This command is used mainly for debugging and diagnostics, and is not "
            "guaranteed to be stable across releases."
        ),
    ),
    CommandSpec(
        name="get_app_keys",
        group="Key Management",
        min_arity=3,
        max_arity=3,
        parameters=(
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
            ParameterSpec(name="name_or_id_address", realtype="name-or-id-address", pattern=NAME_OR_ID_ADDRESS_PATTERN),
            ParameterSpec(name="app_origin", realtype="url", pattern=URL_PATTERN),
        ),
        help_text=(
            "Get the application private key from a 12-word backup phrase and a name "
            "or ID-address.  This is the private key used to sign data in Gaia, and "
            "its address is the Gaia bucket address.  If you provide your encrypted "
            "backup phrase, you will be asked to decrypt it.  If you provide a name "
            "instead of an ID-address, its ID-address will be queried automatically "
            "(note that this means that the name must already be registered).  Note "
            "that this command does NOT verify whether or not the name or ID-address "
            "was created by the backup phrase.  You should do this yourself via the "
            "\"get_owner_keys\" command if you are not sure.\n"
            "There are two derivation paths emitted by this command:  a \"keyInfo\" "
            "path and a \"legacyKeyInfo\"path.  You should use the one that matches "
            "the Gaia hub read URL's address, if you have already signed in before.  "
            "If not, then you should use the \"keyInfo\" path when possible.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export BACKUP_PHRASE=\"one race buffalo dynamic icon drip width lake extra forest fee kit\"\n"
            "    $ blockstack-cli get_app_keys \"$BACKUP_PHRASE\" ID-19veSw4r1aUG4GcrZFQUD7YZa1v2es2j6s https://my.cool.dapp\n"
            "    {\n"
            "      \"keyInfo\": {\n"
            "        \"privateKey\": \"TODO\",\n"
            "        \"address\": \"TODO\"\n"
            "      },\n"
            "      \"legacyKeyInfo\": {\n"
            "        \"privateKey\": \"90f9ec4e13fb9a00243b4c1510075157229bda73076c7c721208c2edca28ea8b\",\n"
            "        \"address\": \"1Lr8ggSgdmfcb4764woYutUfFqQMjEoKHc\"\n"
            "      },\n"
            "      \"ownerKeyIndex\": 0\n"
            "    }"
        ),
    ),
    CommandSpec(
        name="get_owner_keys",
        group="Key Management",
        min_arity=1,
        max_arity=2,
        parameters=(
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
            ParameterSpec(name="index", realtype="integer", pattern=UINT_PATTERN),
        ),
        help_text=(
            "Get the list of owner private keys and ID-addresses from a 12-word "
            "backup phrase.  Pass non-zero values for INDEX to generate the sequence "
            "of ID-addresses that can be used to own Blockstack IDs.  If you provide "
            "an encrypted 12-word backup phrase, you will be asked for your password "
            "to decrypt it."
        ),
    ),
    CommandSpec(
        name="get_payment_key",
        group="Key Management",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
        ),
        help_text=(
            "Get the payment private key from a 12-word backup phrase.  If you "
            "provide an encrypted backup phrase, you will be asked for your password "
            "to decrypt it."
        ),
    ),
    CommandSpec(
        name="get_zonefile",
        group="Peer Services",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
        ),
        help_text="Get the current zone file for a Blockstack ID",
    ),
    CommandSpec(
        name="help",
        group="CLI",
        min_arity=0,
        max_arity=1,
        parameters=(
            ParameterSpec(name="command", realtype="command"),
        ),
        help_text="Get the usage string for a CLI command",
    ),
    CommandSpec(
        name="lookup",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
        ),
        help_text="Get and authenticate the profile and zone file for a Blockstack ID",
    ),
    CommandSpec(
        name="names",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
        ),
        help_text="Get the list of Blockstack IDs owned by an ID-address.",
    ),
    CommandSpec(
        name="make_keychain",
        group="Key Management",
        min_arity=0,
        max_arity=1,
        parameters=(
            ParameterSpec(name="backup_phrase", realtype="12_words_or_ciphertext"),
        ),
        help_text=(
            "Generate the owner and payment private keys, optionally from a given "
            "12-word backup phrase.  If no backup phrase is given, a new one will be "
            "generated.  If you provide your encrypted backup phrase, you will be "
            "asked to decrypt it."
        ),
    ),
    CommandSpec(
        name="make_zonefile",
        group="Peer Services",
        min_arity=3,
        max_arity=4,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
            ParameterSpec(name="id_address", realtype="ID-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="gaia_url_prefix", realtype="url", pattern=".+"),
            ParameterSpec(name="resolver_url", realtype="url", pattern=".+"),
        ),
        help_text=(
            "Generate a zone file for a Blockstack ID with the given profile URL.  "
            "If you know the ID-address for the Blockstack ID, the profile URL "
            "usually takes the form of:\n"
            "\n"
            "     {GAIA_URL_PREFIX}/{ADDRESS}/profile.json\n"
            "\n"
            "where {GAIA_URL_PREFIX} is the *read* endpoint of your Gaia hub (e.g. "
            "https://gaia.blockstack.org/hub) and {ADDRESS} is the base58check part "
            "of your ID-address (i.e. the string following 'ID-')."
        ),
    ),
    CommandSpec(
        name="name_import",
        group="Namespace Operations",
        min_arity=4,
        max_arity=6,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="gaia_url_prefix", realtype="url", pattern=".+"),
            ParameterSpec(name="reveal_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="zonefile", realtype="path", pattern=".+"),
            ParameterSpec(name="zonefile_hash", realtype="zonefile_hash", pattern=ZONEFILE_HASH_PATTERN),
        ),
        help_text=(
            "Import a name into a namespace you revealed.  The REVEAL_KEY must be "
            "the same as the key that revealed the namespace.  You can only import a "
            "name into a namespace if the namespace has not yet been launched (i.e. "
            "via `namespace_ready`), and if the namespace was revealed less than a "
            "year ago (52595 blocks ago).\n"
            "\n"
            "A zone file will be generated for this name automatically, if "
            "\"ZONEFILE\" is not given.  By default, the zone file will have a URL to "
            "the name owner's profile prefixed by GAIA_URL_PREFIX.  If you know the "
            "*write* endpoint for the name owner's Gaia hub, you can find out the "
            "GAIA_URL_PREFIX to use with \"curl $GAIA_HUB/hub_info\".\n"
            "\n"
            "If you specify an argument for \"ZONEFILE,\" then the GAIA_URL_PREFIX "
            "argument is ignored in favor of your custom zone file on disk.\n"
            "\n"
            "If you specify a valid zone file hash for \"ZONEFILE_HASH,\" then it will "
            "be used in favor of both ZONEFILE and GAIA_URL_PREFIX.  The zone file "
            "hash will be incorporated directly into the name-import transaction.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export REVEAL_KEY=\"bfeffdf57f29b0cc1fab9ea197bb1413da2561fe4b83e962c7f02fbbe2b1cd5401\"\n"
            "    $ export ID_ADDRESS=\"ID-18e1bqU7B5qUPY3zJgMLxDnexyStTeSnvV\"\n"
            "    $ blockstack-cli name_import example.id \"$ID_ADDRESS\" https://gaia.blockstack.org/hub \"$REVEAL_KEY\""
        ),
    ),
    CommandSpec(
        name="namespace_preorder",
        group="Namespace Operations",
        min_arity=3,
        max_arity=3,
        parameters=(
            ParameterSpec(name="namespace_id", realtype="namespace_id", pattern=NAMESPACE_PATTERN),
            ParameterSpec(name="reveal_address", realtype="address", pattern=ADDRESS_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Preorder a namespace.  This is the first of three steps to creating a "
            "namespace.  Once this transaction is confirmed, you will need to use "
            "the `namespace_reveal` command to reveal the namespace (within 24 "
            "hours, or 144 blocks)."
        ),
    ),
    CommandSpec(
        name="namespace_reveal",
        group="Namespace Operations",
        min_arity=10,
        max_arity=10,
        parameters=(
            ParameterSpec(name="namespace_id", realtype="namespace_id", pattern=NAMESPACE_PATTERN),
            ParameterSpec(name="reveal_address", realtype="address", pattern=ADDRESS_PATTERN),
            ParameterSpec(name="version", realtype="2-byte-integer", pattern=INT_PATTERN),
            ParameterSpec(name="lifetime", realtype="4-byte-integer", pattern=INT_PATTERN),
            ParameterSpec(name="coefficient", realtype="1-byte-integer", pattern=INT_PATTERN),
            ParameterSpec(name="base", realtype="1-byte-integer", pattern=INT_PATTERN),
            ParameterSpec(name="price_buckets", realtype="csv-of-16-nybbles", pattern=r"^([0-9]{1,2},){15}[0-9]{1,2}\Z"),
            ParameterSpec(name="nonalpha_discount", realtype="nybble", pattern=INT_PATTERN),
            ParameterSpec(name="no_vowel_discount", realtype="nybble", pattern=INT_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Reveal a preordered namespace, and set the price curve and payment "
            "options.  This is the second of three steps required to create a "
            "namespace, and must be done shortly after the associated "
            "\"namespace_preorder\" command."
        ),
    ),
    CommandSpec(
        name="namespace_ready",
        group="Namespace Operations",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="namespace_id", realtype="namespace_id", pattern=NAMESPACE_PATTERN),
            ParameterSpec(name="reveal_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Launch a revealed namespace.  This is the third and final step of "
            "creating a namespace.  Once launched, you will not be able to import "
            "names anymore."
        ),
    ),
    CommandSpec(
        name="price",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=NAME_PATTERN),
        ),
        help_text="Get the price of a name",
    ),
    CommandSpec(
        name="price_namespace",
        group="Namespace Operations",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="namespace_id", realtype="namespace_id", pattern=NAMESPACE_PATTERN),
        ),
        help_text="Get the price of a namespace",
    ),
    CommandSpec(
        name="profile_sign",
        group="Profiles",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="profile", realtype="path"),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN),
        ),
        help_text=(
            "Sign a profile on disk with a given owner private key.  Print out the "
            "signed profile JWT."
        ),
    ),
    CommandSpec(
        name="profile_store",
        group="Profiles",
        min_arity=4,
        max_arity=4,
        parameters=(
            ParameterSpec(name="user_id", realtype="name-or-id-address", pattern=NAME_OR_ID_ADDRESS_PATTERN),
            ParameterSpec(name="profile", realtype="path"),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN),
            ParameterSpec(name="gaia_hub", realtype="url"),
        ),
        help_text=(
            "Store a profile on disk to a Gaia hub.  USER_ID can be either a "
            "Blockstack ID or an ID-address.  The GAIA_HUB argument must be the "
            "*write* endpoint for the user's Gaia hub (e.g. "
            "https://hub.blockstack.org).  You can verify this by ensuring that you "
            "can run 'curl \"$GAIA_HUB/hub_info\"' successfully."
        ),
    ),
    CommandSpec(
        name="profile_verify",
        group="Profiles",
        min_arity=2,
        max_arity=2,
        parameters=(
            ParameterSpec(name="profile", realtype="path"),
            ParameterSpec(name="id_address", realtype="id-address", pattern=f"{ID_ADDRESS_PATTERN}|{PUBLIC_KEY_PATTERN}"),
        ),
        help_text="Verify a profile on disk using a name or a public key (ID_ADDRESS).",
    ),
    CommandSpec(
        name="renew",
        group="Blockstack ID Management",
        min_arity=3,
        max_arity=6,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="new_id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="zonefile", realtype="path"),
            ParameterSpec(name="zonefile_hash", realtype="zonefile_hash", pattern=ZONEFILE_HASH_PATTERN),
        ),
        help_text=(
            "Renew a name.  Optionally transfer it to a new owner address "
            "(NEW_ID_ADDRESS), and optionally load up and give it a new zone file on "
            "disk (ZONEFILE).  You will need to later use \"zonefile_push\" to "
            "replicate the zone file to the Blockstack peer network once the "
            "transaction confirms."
        ),
    ),
    CommandSpec(
        name="register",
        group="Blockstack ID Management",
        min_arity=4,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="gaia_hub", realtype="url"),
            ParameterSpec(name="zonefile", realtype="path"),
        ),
        help_text=(
            "If you are trying to register a name for a *private key*, use this "
            "command.\n"
            "\n"
            "Register a name to a single name-owning private key.  After "
            "successfully running this command, and after waiting a couple hours, "
            "your name will be ready to use and will resolve to a signed empty "
            "profile hosted on the given Gaia hub (GAIA_HUB).\n"
            "\n"
            "Behind the scenes, this will generate and send two transactions and "
            "generate and replicate a zone file with the given Gaia hub URL "
            "(GAIA_HUB).  Note that the GAIA_HUB argument must correspond to the "
            "*write* endpoint of the Gaia hub (i.e. you should be able to run 'curl "
            "\"$GAIA_HUB/hub_info\"' and get back data).  If you are using Blockstack "
            "PBC's default Gaia hub, pass \"https://hub.blockstack.org\" for this "
            "argument.\n"
            "\n"
            "By default, this command generates a zone file automatically that "
            "points to the Gaia hub's read endpoint (which is queried on-the-fly "
            "from GAIA_HUB).  If you instead want to have a custom zone file for "
            "this name, you can specify a path to it on disk with the ZONEFILE "
            "argument.\n"
            "\n"
            "If this command completes successfully, your name will be ready to use "
            "once both transactions have 7+ confirmations.  You can use the "
            "\"get_confirmations\" command to track the confirmations on the "
            "transaction IDs returned by this command.\n"
            "\n"
            "WARNING: You should *NOT* use the payment private key (PAYMENT_KEY) "
            "while the name is being confirmed.  If you do so, you could "
            "double-spend one of the pending transactions and lose your name.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export OWNER=\"136ff26efa5db6f06b28f9c8c7a0216a1a52598045162abfe435d13036154a1b01\"\n"
            "    $ export PAYMENT=\"bfeffdf57f29b0cc1fab9ea197bb1413da2561fe4b83e962c7f02fbbe2b1cd5401\"\n"
            "    $ blockstack-cli register example.id \"$OWNER\" \"$PAYMENT\" https://hub.blockstack.org"
        ),
    ),
    CommandSpec(
        name="register_addr",
        group="Blockstack ID Management",
        min_arity=4,
        max_arity=4,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="id-address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="gaia_url_prefix", realtype="url"),
            ParameterSpec(name="zonefile", realtype="path"),
        ),
        help_text=(
            "If you are trying to register a name for an *ID-address*, use this "
            "command.\n"
            "\n"
            "Register a name to someone's ID-address.  After successfully running "
            "this command and waiting a couple of hours, the name will be registered "
            "on-chain and have a zone file with a URL to where the owner's profile "
            "should be.  This command does NOT generate, sign, or replicate a "
            "profile for the name---the name owner will need to do this separately, "
            "once the name is registered.\n"
            "\n"
            "Behind the scenes, this command will generate two transactions, and "
            "generate and replicate a zone file with the given Gaia hub read URL "
            "(GAIA_URL_PREFIX).  Note that the GAIA_URL_PREFIX argument must "
            "correspond to the *read* endpoint of the Gaia hub (e.g. if you are "
            "using Blockstack PBC's default Gaia hub, this is "
            "\"https://gaia.blockstack.org/hub\"). If you know the *write* endpoint of "
            "the name owner's Gaia hub, you can find the right value for "
            "GAIA_URL_PREFIX by running \"curl $GAIA_HUB/hub_info\".\n"
            "\n"
            "No profile will be generated or uploaded by this command.  Instead, "
            "this command generates a zone file that will include the URL to a "
            "profile based on the GAIA_URL_PREFIX argument.\n"
            "\n"
            "The zone file will be generated automatically from the GAIA_URL_PREFIX "
            "argument.  If you need to use a custom zone file, you can pass the path "
            "to it on disk via the ZONEFILE argument.\n"
            "\n"
            "If this command completes successfully, the name will be ready to use "
            "in a couple of hours---that is, once both transactions have 7+ "
            "confirmations. You can use the \"get_confirmations\" command to track the "
            "confirmations.\n"
            "\n"
            "WARNING: You should *NOT* use the payment private key (PAYMENT_KEY) "
            "while the name is being confirmed.  If you do so, you could "
            "double-spend one of the pending transactions and lose the name.\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export ID_ADDRESS=\"ID-18e1bqU7B5qUPY3zJgMLxDnexyStTeSnvV\"\n"
            "    $ export PAYMENT=\"bfeffdf57f29b0cc1fab9ea197bb1413da2561fe4b83e962c7f02fbbe2b1cd5401\"\n"
            "    $ blockstack-cli register_addr example.id \"$ID_ADDRESS\" \"$PAYMENT\" https://gaia.blockstack.org/hub"
        ),
    ),
    CommandSpec(
        name="register_subdomain",
        group="Blockstack ID Management",
        min_arity=4,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=SUBDOMAIN_PATTERN),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN),
            ParameterSpec(name="gaia_hub", realtype="url"),
            ParameterSpec(name="registrar", realtype="url"),
            ParameterSpec(name="zonefile", realtype="path"),
        ),
        help_text=(
            "Register a subdomain.  This will generate and sign a subdomain zone "
            "file record with the given GAIA_HUB URL and send it to the given "
            "subdomain registrar (REGISTRAR).\n"
            "\n"
            "This command generates, signs, and uploads a profile to the GAIA_HUB "
            "url.  Note that the GAIA_HUB argument must correspond to the *write* "
            "endpoint of your Gaia hub (i.e. you should be able to run 'curl "
            "\"$GAIA_HUB/hub_info\"' successfully).  If you are using Blockstack PBC's "
            "default Gaia hub, this argument should be \"https://hub.blockstack.org\".\n"
            "\n"
            "WARNING: At this time, no validation will occur on the registrar URL.  "
            "Be sure that the URL corresponds to the registrar for the on-chain name "
            "before running this command!\n"
            "\n"
            "Example:\n"
            "\n"
            "    $ export OWNER=\"6e50431b955fe73f079469b24f06480aee44e4519282686433195b3c4b5336ef01\"\n"
            "    $ # NOTE: https://registrar.blockstack.org is the registrar for personal.id!\n"
            "    $ blockstack-cli register_subdomain hello.personal.id \"$OWNER\" https://hub.blockstack.org https://registrar.blockstack.org\n"
        ),
    ),
    CommandSpec(
        name="revoke",
        group="Blockstack ID Management",
        min_arity=3,
        max_arity=3,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text="Revoke a name.  This renders it unusable until it expires (if ever).",
    ),
    CommandSpec(
        name="send_btc",
        group="Account Management",
        min_arity=3,
        max_arity=3,
        parameters=(
            ParameterSpec(name="recipient_address", realtype="address", pattern=ADDRESS_PATTERN),
            ParameterSpec(name="amount", realtype="satoshis", pattern=INT_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Send some Bitcoin (in satoshis) from a payment key to an address.  Up "
            "to the given amount will be spent, but likely less---the actual amount "
            "sent will be the amount given, minus the transaction fee.  For example, "
            "if you want to send 10000 satoshis but the transaction fee is 2000 "
            "satoshis, then the resulting transaction will send 8000 satoshis to the "
            "given address.  This is to ensure that this command does not "
            "*over*-spend your Bitcoin.  If you want to check the amount before "
            "spending, pass the -x flag to see the raw transaction."
        ),
    ),
    CommandSpec(
        name="send_tokens",
        group="Account Management",
        min_arity=4,
        max_arity=5,
        parameters=(
            ParameterSpec(name="address", realtype="address", pattern=STACKS_ADDRESS_PATTERN),
            ParameterSpec(name="type", realtype="token-type", pattern=rf"{NAMESPACE_PATTERN}|^STACKS\Z"),
            ParameterSpec(name="amount", realtype="integer", pattern=UINT_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="memo", realtype="string", pattern=r"^.{0,34}\Z"),
        ),
        help_text=(
            "Send tokens to the given ADDRESS.  The only supported TOKEN-TYPE is "
            "\"STACKS\".  Optionally include a memo string (MEMO) up to 34 characters "
            "long."
        ),
    ),
    CommandSpec(
        name="transfer",
        group="Blockstack ID Management",
        min_arity=5,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="new_id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="keep_zonefile", realtype="true-or-false", pattern=r"^(true|false)\Z"),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Transfer a Blockstack ID to a new address (NEW_ID_ADDRESS).  Optionally "
            "preserve its zone file (KEEP_ZONEFILE)."
        ),
    ),
    CommandSpec(
        name="tx_preorder",
        group="Blockstack ID Management",
        min_arity=3,
        max_arity=3,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
        ),
        help_text=(
            "Generate and send NAME_PREORDER transaction, for a Blockstack ID to be "
            "owned by a given ID_ADDRESS."
        ),
    ),
    CommandSpec(
        name="tx_register",
        group="Blockstack ID Management",
        min_arity=3,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="id_address", realtype="id-address", pattern=ID_ADDRESS_PATTERN),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="zonefile", realtype="path"),
            ParameterSpec(name="zonefile_hash", realtype="zonefile_hash", pattern=ZONEFILE_HASH_PATTERN),
        ),
        help_text=(
            "Generate and send a NAME_REGISTRATION transaction, assigning the given "
            "BLOCKSTACK_ID to the given ID_ADDRESS.  Optionally pair the Blockstack "
            "ID with a zone file (ZONEFILE) or the hash of the zone file "
            "(ZONEFILE_HASH).  You will need to push the zone file to the peer "
            "network after the transaction confirms (i.e. with \"zonefile_push\")."
        ),
    ),
    CommandSpec(
        name="update",
        group="Blockstack ID Management",
        min_arity=4,
        max_arity=5,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="on-chain-blockstack_id", pattern=NAME_PATTERN),
            ParameterSpec(name="zonefile", realtype="path"),
            ParameterSpec(name="owner_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="payment_key", realtype="private_key", pattern=PRIVATE_KEY_PATTERN_ANY),
            ParameterSpec(name="zonefile_hash", realtype="zonefile_hash", pattern=ZONEFILE_HASH_PATTERN),
        ),
        help_text=(
            "Update the zonefile for an on-chain Blockstack ID.  Once the "
            "transaction confirms, you will need to push the zone file to the "
            "Blockstack peer network with \"zonefile_push.\""
        ),
    ),
    CommandSpec(
        name="whois",
        group="Querying Blockstack IDs",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="blockstack_id", realtype="blockstack_id", pattern=BLOCKSTACK_ID_PATTERN),
        ),
        help_text="Look up the zone file and owner of a Blockstack ID",
    ),
    CommandSpec(
        name="zonefile_push",
        group="Peer Services",
        min_arity=1,
        max_arity=1,
        parameters=(
            ParameterSpec(name="zonefile", realtype="path"),
        ),
        help_text=(
            "Push a zone file on disk to the Blockstack peer network.  The zone file "
            "must correspond to a zone file hash that has already been announced, "
            "i.e. via a NAME_UPDATE, NAME_REGISTRATION, NAME_RENEWAL, or NAME_IMPORT "
            "transaction.  This command does *not* let you upload arbitrary zone "
            "files."
        ),
    ),
)


def build_default_registry() -> CommandRegistry:
    return CommandRegistry(COMMANDS)
