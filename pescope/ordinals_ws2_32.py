"""Names of functions exported by ordinal from the Winsock 2 library."""

DLL_NAME = "ws2_32.dll"


def _build() -> dict[int, str]:
    names: dict[int, str] = {}

    def add(start: int, words: str, prefix: str = "") -> None:
        names.update(
            (start + i, prefix + word) for i, word in enumerate(words.split())
        )

    add(1, "accept bind closesocket connect getpeername getsockname getsockopt "
           "htonl htons ioctlsocket inet_addr inet_ntoa listen ntohl ntohs "
           "recv recvfrom select send sendto setsockopt shutdown socket")
    add(24, "GetAddrInfoW GetNameInfoW WSApSetPostRoutine FreeAddrInfoW "
            "WPUCompleteOverlappedRequest")
    add(29, "Accept AddressToStringA AddressToStringW CloseEvent Connect "
            "CreateEvent DuplicateSocketA DuplicateSocketW "
            "EnumNameSpaceProvidersA EnumNameSpaceProvidersW EnumNetworkEvents "
            "EnumProtocolsA EnumProtocolsW EventSelect GetOverlappedResult "
            "GetQOSByName GetServiceClassInfoA GetServiceClassInfoW "
            "GetServiceClassNameByClassIdA GetServiceClassNameByClassIdW "
            "Htonl Htons", "WSA")
    add(51, "gethostbyaddr gethostbyname getprotobyname getprotobynumber "
            "getservbyname getservbyport gethostname")
    add(58, "InstallServiceClassA InstallServiceClassW Ioctl JoinLeaf "
            "LookupServiceBeginA LookupServiceBeginW LookupServiceEnd "
            "LookupServiceNextA LookupServiceNextW NSPIoctl Ntohl Ntohs "
            "ProviderConfigChange Recv RecvDisconnect RecvFrom "
            "RemoveServiceClass ResetEvent Send SendDisconnect SendTo SetEvent "
            "SetServiceA SetServiceW SocketA SocketW StringToAddressA "
            "StringToAddressW WaitForMultipleEvents", "WSA")
    add(87, "DeinstallProvider EnableNSProvider EnumProtocols GetProviderPath "
            "InstallNameSpace InstallProvider UnInstallNameSpace UpdateProvider "
            "WriteNameSpaceOrder WriteProviderOrder", "WSC")
    add(97, "freeaddrinfo getaddrinfo getnameinfo")
    add(101, "AsyncSelect AsyncGetHostByAddr AsyncGetHostByName "
             "AsyncGetProtoByNumber AsyncGetProtoByName AsyncGetServByPort "
             "AsyncGetServByName CancelAsyncRequest SetBlockingHook "
             "UnhookBlockingHook GetLastError SetLastError CancelBlockingCall "
             "IsBlocking Startup Cleanup", "WSA")
    add(151, "__WSAFDIsSet")
    add(500, "WEP")
    return dict(sorted(names.items()))


ORDINAL_NAMES = _build()