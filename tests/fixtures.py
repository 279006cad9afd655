# Canned route command output, one constant per layout.

MACOS_NETSTAT = """\
Routing tables

Internet:
Destination        Gateway            Flags               Netif Expire
default            192.168.1.1        UGScg                 en0
127                127.0.0.1          UCS                   lo0
127.0.0.1          127.0.0.1          UH                    lo0
192.168.1          link#6             UCS                   en0      !
192.168.1.1/32     link#6             UCS                   en0      !
192.168.1.1        a4:91:b1:2c:3d:4e  UHLWIir               en0   1183

Internet6:
Destination                             Gateway                                 Flags               Netif Expire
default                                 fe80::%utun0                            UGcIg               utun0
::1                                     ::1                                     UHL                   lo0
fe80::%lo0/64                           fe80::1%lo0                             UcI                   lo0
"""

MACOS_NETSTAT_OLD = """\
Routing tables

Internet:
Destination        Gateway            Flags        Refs      Use   Netif Expire
default            10.0.0.1           UGSc           12        0     en1
10.0.0/24          link#5             UCS             2        0     en1
"""

LINUX_IP_ROUTE = """\
default dev tailscale0 table 52 
10.0.0.0/8 via 10.1.1.1 dev wg0 table 220 proto static 
default via 192.168.1.1 dev eth0 proto dhcp src 192.168.1.100 metric 100 
192.168.1.0/24 dev eth0 proto kernel scope link src 192.168.1.100 metric 100 
10.8.0.5 via 10.8.0.1 dev tun0 
local 127.0.0.0/8 dev lo table local proto kernel scope host src 127.0.0.1 
broadcast 192.168.1.255 dev eth0 table local proto kernel scope link src 192.168.1.100 
blackhole 10.99.0.0/16 proto static 
unreachable default dev lo table unspec proto kernel metric 4294967295 error -101 pref medium
::1 dev lo proto kernel metric 256 pref medium
fe80::/64 dev eth0 proto kernel metric 256 pref medium
default via fe80::1 dev eth0 proto ra metric 100 expires 1798sec pref medium
local ::1 dev lo table local proto kernel metric 0 pref medium
multicast ff00::/8 dev eth0 table local proto kernel metric 256 pref medium
"""

LINUX_ROUTE_N = """\
Kernel IP routing table
Destination     Gateway         Genmask         Flags Metric Ref    Use Iface
0.0.0.0         192.168.1.1     0.0.0.0         UG    100    0        0 eth0
0.0.0.0         10.8.0.1        128.0.0.0       UG    0      0        0 tun0
192.168.1.0     0.0.0.0         255.255.255.0   U     100    0        0 eth0
"""

LINUX_NETSTAT_RN = """\
Kernel IP routing table
Destination     Gateway         Genmask         Flags   MSS Window  irtt Iface
0.0.0.0         192.168.1.1     0.0.0.0         UG        0 0          0 eth0
192.168.1.0     0.0.0.0         255.255.255.0   U         0 0          0 eth0
"""

LINUX_ROUTE_INET6 = """\
Kernel IPv6 routing table
Destination                    Next Hop                   Flag Met Ref Use If
::/0                           fe80::1                    UG   100 1     0 eth0
fe80::/64                      ::                         U    256 1     0 eth0
"""

WINDOWS_ROUTE_PRINT = """\
===========================================================================
Interface List
 12...00 15 5d 01 02 03 ......Intel(R) Ethernet Connection
  1...........................Software Loopback Interface 1
===========================================================================

IPv4 Route Table
===========================================================================
Active Routes:
Network Destination        Netmask          Gateway       Interface  Metric
          0.0.0.0          0.0.0.0      192.168.1.1    192.168.1.100     25
          0.0.0.0        128.0.0.0         10.8.0.1         10.8.0.2     35
        127.0.0.0        255.0.0.0         On-link         127.0.0.1    331
      192.168.1.0    255.255.255.0         On-link     192.168.1.100    281
===========================================================================
Persistent Routes:
  Network Address          Netmask  Gateway Address  Metric
          0.0.0.0          0.0.0.0         10.0.0.1  Default
===========================================================================

IPv6 Route Table
===========================================================================
Active Routes:
 If Metric Network Destination      Gateway
  1    331 ::1/128                  On-link
 12    281 ::/0                     fe80::1
 12    281 fe80::/64                On-link
 12    281 fe80::1c2d:3e4f:5a6b:7c8d/128
                                    On-link
===========================================================================
Persistent Routes:
  None
"""
