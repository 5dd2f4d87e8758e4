r"""
Static ENI limits seed table

Published per-instance-type network interface limits. Generated with:

    AWS_REGION=us-east-1 aws ec2 describe-instance-types | jq -r '.InstanceTypes[] |
    "\"\(.InstanceType)\": Limits(\(.NetworkInfo.MaximumNetworkInterfaces), \(.NetworkInfo.Ipv4AddressesPerInterface), \(.NetworkInfo.Ipv6AddressesPerInterface), \"\(.Hypervisor)\"),"' \
    | sort | sed "s/null//"

Source: https://docs.aws.amazon.com/AWSEC2/latest/UserGuide/using-eni.html#AvailableIpPerENI
"""

from typing import Dict

from enilimits.core.models import Limits

STATIC_ENI_LIMITS: Dict[str, Limits] = {
    "a1.2xlarge": Limits(4, 15, 15, "nitro"),
    "a1.4xlarge": Limits(8, 30, 30, "nitro"),
    "a1.large": Limits(3, 10, 10, "nitro"),
    "a1.medium": Limits(2, 4, 4, "nitro"),
    "a1.metal": Limits(8, 30, 30, ""),
    "a1.xlarge": Limits(4, 15, 15, "nitro"),
    "c1.medium": Limits(2, 6, 0, "xen"),
    "c1.xlarge": Limits(4, 15, 0, "xen"),
    "c3.2xlarge": Limits(4, 15, 15, "xen"),
    "c3.4xlarge": Limits(8, 30, 30, "xen"),
    "c3.8xlarge": Limits(8, 30, 30, "xen"),
    "c3.large": Limits(3, 10, 10, "xen"),
    "c3.xlarge": Limits(4, 15, 15, "xen"),
    "c4.2xlarge": Limits(4, 15, 15, "xen"),
    "c4.4xlarge": Limits(8, 30, 30, "xen"),
    "c4.8xlarge": Limits(8, 30, 30, "xen"),
    "c4.large": Limits(3, 10, 10, "xen"),
    "c4.xlarge": Limits(4, 15, 15, "xen"),
    "c5.12xlarge": Limits(8, 30, 30, "nitro"),
    "c5.18xlarge": Limits(15, 50, 50, "nitro"),
    "c5.24xlarge": Limits(15, 50, 50, "nitro"),
    "c5.2xlarge": Limits(4, 15, 15, "nitro"),
    "c5.4xlarge": Limits(8, 30, 30, "nitro"),
    "c5.9xlarge": Limits(8, 30, 30, "nitro"),
    "c5.large": Limits(3, 10, 10, "nitro"),
    "c5.metal": Limits(15, 50, 50, ""),
    "c5.xlarge": Limits(4, 15, 15, "nitro"),
    "c5a.12xlarge": Limits(8, 30, 30, "nitro"),
    "c5a.16xlarge": Limits(15, 50, 50, "nitro"),
    "c5a.24xlarge": Limits(15, 50, 50, "nitro"),
    "c5a.2xlarge": Limits(4, 15, 15, "nitro"),
    "c5a.4xlarge": Limits(8, 30, 30, "nitro"),
    "c5a.8xlarge": Limits(8, 30, 30, "nitro"),
    "c5a.large": Limits(3, 10, 10, "nitro"),
    "c5a.xlarge": Limits(4, 15, 15, "nitro"),
    "c5ad.12xlarge": Limits(8, 30, 30, "nitro"),
    "c5ad.16xlarge": Limits(15, 50, 50, "nitro"),
    "c5ad.24xlarge": Limits(15, 50, 50, "nitro"),
    "c5ad.2xlarge": Limits(4, 15, 15, "nitro"),
    "c5ad.4xlarge": Limits(8, 30, 30, "nitro"),
    "c5ad.8xlarge": Limits(8, 30, 30, "nitro"),
    "c5ad.large": Limits(3, 10, 10, "nitro"),
    "c5ad.xlarge": Limits(4, 15, 15, "nitro"),
    "c5d.12xlarge": Limits(8, 30, 30, "nitro"),
    "c5d.18xlarge": Limits(15, 50, 50, "nitro"),
    "c5d.24xlarge": Limits(15, 50, 50, "nitro"),
    "c5d.2xlarge": Limits(4, 15, 15, "nitro"),
    "c5d.4xlarge": Limits(8, 30, 30, "nitro"),
    "c5d.9xlarge": Limits(8, 30, 30, "nitro"),
    "c5d.large": Limits(3, 10, 10, "nitro"),
    "c5d.metal": Limits(15, 50, 50, ""),
    "c5d.xlarge": Limits(4, 15, 15, "nitro"),
    "c5n.18xlarge": Limits(15, 50, 50, "nitro"),
    "c5n.2xlarge": Limits(4, 15, 15, "nitro"),
    "c5n.4xlarge": Limits(8, 30, 30, "nitro"),
    "c5n.9xlarge": Limits(8, 30, 30, "nitro"),
    "c5n.large": Limits(3, 10, 10, "nitro"),
    "c5n.metal": Limits(15, 50, 50, ""),
    "c5n.xlarge": Limits(4, 15, 15, "nitro"),
    "c6a.12xlarge": Limits(8, 30, 30, "nitro"),
    "c6a.16xlarge": Limits(15, 50, 50, "nitro"),
    "c6a.24xlarge": Limits(15, 50, 50, "nitro"),
    "c6a.2xlarge": Limits(4, 15, 15, "nitro"),
    "c6a.32xlarge": Limits(15, 50, 50, "nitro"),
    "c6a.48xlarge": Limits(15, 50, 50, "nitro"),
    "c6a.4xlarge": Limits(8, 30, 30, "nitro"),
    "c6a.8xlarge": Limits(8, 30, 30, "nitro"),
    "c6a.large": Limits(3, 10, 10, "nitro"),
    "c6a.xlarge": Limits(4, 15, 15, "nitro"),
    "c6g.12xlarge": Limits(8, 30, 30, "nitro"),
    "c6g.16xlarge": Limits(15, 50, 50, "nitro"),
    "c6g.2xlarge": Limits(4, 15, 15, "nitro"),
    "c6g.4xlarge": Limits(8, 30, 30, "nitro"),
    "c6g.8xlarge": Limits(8, 30, 30, "nitro"),
    "c6g.large": Limits(3, 10, 10, "nitro"),
    "c6g.medium": Limits(2, 4, 4, "nitro"),
    "c6g.metal": Limits(15, 50, 50, ""),
    "c6g.xlarge": Limits(4, 15, 15, "nitro"),
    "c6gd.12xlarge": Limits(8, 30, 30, "nitro"),
    "c6gd.16xlarge": Limits(15, 50, 50, "nitro"),
    "c6gd.2xlarge": Limits(4, 15, 15, "nitro"),
    "c6gd.4xlarge": Limits(8, 30, 30, "nitro"),
    "c6gd.8xlarge": Limits(8, 30, 30, "nitro"),
    "c6gd.large": Limits(3, 10, 10, "nitro"),
    "c6gd.medium": Limits(2, 4, 4, "nitro"),
    "c6gd.metal": Limits(15, 50, 50, ""),
    "c6gd.xlarge": Limits(4, 15, 15, "nitro"),
    "c6gn.12xlarge": Limits(8, 30, 30, "nitro"),
    "c6gn.16xlarge": Limits(15, 50, 50, "nitro"),
    "c6gn.2xlarge": Limits(4, 15, 15, "nitro"),
    "c6gn.4xlarge": Limits(8, 30, 30, "nitro"),
    "c6gn.8xlarge": Limits(8, 30, 30, "nitro"),
    "c6gn.large": Limits(3, 10, 10, "nitro"),
    "c6gn.medium": Limits(2, 4, 4, "nitro"),
    "c6gn.xlarge": Limits(4, 15, 15, "nitro"),
    "c6i.12xlarge": Limits(8, 30, 30, "nitro"),
    "c6i.16xlarge": Limits(15, 50, 50, "nitro"),
    "c6i.24xlarge": Limits(15, 50, 50, "nitro"),
    "c6i.2xlarge": Limits(4, 15, 15, "nitro"),
    "c6i.32xlarge": Limits(15, 50, 50, "nitro"),
    "c6i.4xlarge": Limits(8, 30, 30, "nitro"),
    "c6i.8xlarge": Limits(8, 30, 30, "nitro"),
    "c6i.large": Limits(3, 10, 10, "nitro"),
    "c6i.metal": Limits(15, 50, 50, ""),
    "c6i.xlarge": Limits(4, 15, 15, "nitro"),
    "cc2.8xlarge": Limits(8, 30, 0, "xen"),
    "d2.2xlarge": Limits(4, 15, 15, "xen"),
    "d2.4xlarge": Limits(8, 30, 30, "xen"),
    "d2.8xlarge": Limits(8, 30, 30, "xen"),
    "d2.xlarge": Limits(4, 15, 15, "xen"),
    "d3.2xlarge": Limits(4, 5, 5, "nitro"),
    "d3.4xlarge": Limits(4, 10, 10, "nitro"),
    "d3.8xlarge": Limits(3, 20, 20, "nitro"),
    "d3.xlarge": Limits(4, 3, 3, "nitro"),
    "d3en.12xlarge": Limits(3, 30, 30, "nitro"),
    "d3en.2xlarge": Limits(4, 5, 5, "nitro"),
    "d3en.4xlarge": Limits(4, 10, 10, "nitro"),
    "d3en.6xlarge": Limits(4, 15, 15, "nitro"),
    "d3en.8xlarge": Limits(4, 20, 20, "nitro"),
    "d3en.xlarge": Limits(4, 3, 3, "nitro"),
    "dl1.24xlarge": Limits(60, 50, 50, "nitro"),
    "f1.16xlarge": Limits(8, 50, 50, "xen"),
    "f1.2xlarge": Limits(4, 15, 15, "xen"),
    "f1.4xlarge": Limits(8, 30, 30, "xen"),
    "g2.2xlarge": Limits(4, 15, 0, "xen"),
    "g2.8xlarge": Limits(8, 30, 0, "xen"),
    "g3.16xlarge": Limits(15, 50, 50, "xen"),
    "g3.4xlarge": Limits(8, 30, 30, "xen"),
    "g3.8xlarge": Limits(8, 30, 30, "xen"),
    "g3s.xlarge": Limits(4, 15, 15, "xen"),
    "g4ad.16xlarge": Limits(8, 30, 30, "nitro"),
    "g4ad.2xlarge": Limits(2, 4, 4, "nitro"),
    "g4ad.4xlarge": Limits(3, 10, 10, "nitro"),
    "g4ad.8xlarge": Limits(4, 15, 15, "nitro"),
    "g4ad.xlarge": Limits(2, 4, 4, "nitro"),
    "g4dn.12xlarge": Limits(8, 30, 30, "nitro"),
    "g4dn.16xlarge": Limits(4, 15, 15, "nitro"),
    "g4dn.2xlarge": Limits(3, 10, 10, "nitro"),
    "g4dn.4xlarge": Limits(3, 10, 10, "nitro"),
    "g4dn.8xlarge": Limits(4, 15, 15, "nitro"),
    "g4dn.metal": Limits(15, 50, 50, ""),
    "g4dn.xlarge": Limits(3, 10, 10, "nitro"),
    "g5.12xlarge": Limits(15, 50, 50, "nitro"),
    "g5.16xlarge": Limits(8, 30, 30, "nitro"),
    "g5.24xlarge": Limits(15, 50, 50, "nitro"),
    "g5.2xlarge": Limits(4, 15, 15, "nitro"),
    "g5.48xlarge": Limits(15, 50, 50, "nitro"),
    "g5.4xlarge": Limits(8, 30, 30, "nitro"),
    "g5.8xlarge": Limits(8, 30, 30, "nitro"),
    "g5.xlarge": Limits(4, 15, 15, "nitro"),
    "g5g.16xlarge": Limits(15, 50, 50, "nitro"),
    "g5g.2xlarge": Limits(4, 15, 15, "nitro"),
    "g5g.4xlarge": Limits(8, 30, 30, "nitro"),
    "g5g.8xlarge": Limits(8, 30, 30, "nitro"),
    "g5g.metal": Limits(15, 50, 50, ""),
    "g5g.xlarge": Limits(4, 15, 15, "nitro"),
    "h1.16xlarge": Limits(15, 50, 50, "xen"),
    "h1.2xlarge": Limits(4, 15, 15, "xen"),
    "h1.4xlarge": Limits(8, 30, 30, "xen"),
    "h1.8xlarge": Limits(8, 30, 30, "xen"),
    "i2.2xlarge": Limits(4, 15, 15, "xen"),
    "i2.4xlarge": Limits(8, 30, 30, "xen"),
    "i2.8xlarge": Limits(8, 30, 30, "xen"),
    "i2.xlarge": Limits(4, 15, 15, "xen"),
    "i3.16xlarge": Limits(15, 50, 50, "xen"),
    "i3.2xlarge": Limits(4, 15, 15, "xen"),
    "i3.4xlarge": Limits(8, 30, 30, "xen"),
    "i3.8xlarge": Limits(8, 30, 30, "xen"),
    "i3.large": Limits(3, 10, 10, "xen"),
    "i3.metal": Limits(15, 50, 50, ""),
    "i3.xlarge": Limits(4, 15, 15, "xen"),
    "i3en.12xlarge": Limits(8, 30, 30, "nitro"),
    "i3en.24xlarge": Limits(15, 50, 50, "nitro"),
    "i3en.2xlarge": Limits(4, 15, 15, "nitro"),
    "i3en.3xlarge": Limits(4, 15, 15, "nitro"),
    "i3en.6xlarge": Limits(8, 30, 30, "nitro"),
    "i3en.large": Limits(3, 10, 10, "nitro"),
    "i3en.metal": Limits(15, 50, 50, ""),
    "i3en.xlarge": Limits(4, 15, 15, "nitro"),
    "im4gn.16xlarge": Limits(15, 50, 50, "nitro"),
    "im4gn.2xlarge": Limits(4, 15, 15, "nitro"),
    "im4gn.4xlarge": Limits(8, 30, 30, "nitro"),
    "im4gn.8xlarge": Limits(8, 30, 30, "nitro"),
    "im4gn.large": Limits(3, 10, 10, "nitro"),
    "im4gn.xlarge": Limits(4, 15, 15, "nitro"),
    "inf1.24xlarge": Limits(11, 30, 30, "nitro"),
    "inf1.2xlarge": Limits(4, 10, 10, "nitro"),
    "inf1.6xlarge": Limits(8, 30, 30, "nitro"),
    "inf1.xlarge": Limits(4, 10, 10, "nitro"),
    "is4gen.2xlarge": Limits(4, 15, 15, "nitro"),
    "is4gen.4xlarge": Limits(8, 30, 30, "nitro"),
    "is4gen.8xlarge": Limits(8, 30, 30, "nitro"),
    "is4gen.large": Limits(3, 10, 10, "nitro"),
    "is4gen.medium": Limits(2, 4, 4, "nitro"),
    "is4gen.xlarge": Limits(4, 15, 15, "nitro"),
    "m1.large": Limits(3, 10, 0, "xen"),
    "m1.medium": Limits(2, 6, 0, "xen"),
    "m1.small": Limits(2, 4, 0, "xen"),
    "m1.xlarge": Limits(4, 15, 0, "xen"),
    "m2.2xlarge": Limits(4, 30, 0, "xen"),
    "m2.4xlarge": Limits(8, 30, 0, "xen"),
    "m2.xlarge": Limits(4, 15, 0, "xen"),
    "m3.2xlarge": Limits(4, 30, 0, "xen"),
    "m3.large": Limits(3, 10, 0, "xen"),
    "m3.medium": Limits(2, 6, 0, "xen"),
    "m3.xlarge": Limits(4, 15, 0, "xen"),
    "m4.10xlarge": Limits(8, 30, 30, "xen"),
    "m4.16xlarge": Limits(8, 30, 30, "xen"),
    "m4.2xlarge": Limits(4, 15, 15, "xen"),
    "m4.4xlarge": Limits(8, 30, 30, "xen"),
    "m4.large": Limits(2, 10, 10, "xen"),
    "m4.xlarge": Limits(4, 15, 15, "xen"),
    "m5.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5.large": Limits(3, 10, 10, "nitro"),
    "m5.metal": Limits(15, 50, 50, ""),
    "m5.xlarge": Limits(4, 15, 15, "nitro"),
    "m5a.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5a.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5a.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5a.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5a.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5a.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5a.large": Limits(3, 10, 10, "nitro"),
    "m5a.xlarge": Limits(4, 15, 15, "nitro"),
    "m5ad.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5ad.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5ad.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5ad.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5ad.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5ad.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5ad.large": Limits(3, 10, 10, "nitro"),
    "m5ad.xlarge": Limits(4, 15, 15, "nitro"),
    "m5d.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5d.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5d.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5d.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5d.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5d.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5d.large": Limits(3, 10, 10, "nitro"),
    "m5d.metal": Limits(15, 50, 50, ""),
    "m5d.xlarge": Limits(4, 15, 15, "nitro"),
    "m5dn.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5dn.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5dn.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5dn.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5dn.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5dn.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5dn.large": Limits(3, 10, 10, "nitro"),
    "m5dn.metal": Limits(15, 50, 50, ""),
    "m5dn.xlarge": Limits(4, 15, 15, "nitro"),
    "m5n.12xlarge": Limits(8, 30, 30, "nitro"),
    "m5n.16xlarge": Limits(15, 50, 50, "nitro"),
    "m5n.24xlarge": Limits(15, 50, 50, "nitro"),
    "m5n.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5n.4xlarge": Limits(8, 30, 30, "nitro"),
    "m5n.8xlarge": Limits(8, 30, 30, "nitro"),
    "m5n.large": Limits(3, 10, 10, "nitro"),
    "m5n.metal": Limits(15, 50, 50, ""),
    "m5n.xlarge": Limits(4, 15, 15, "nitro"),
    "m5zn.12xlarge": Limits(15, 50, 50, "nitro"),
    "m5zn.2xlarge": Limits(4, 15, 15, "nitro"),
    "m5zn.3xlarge": Limits(8, 30, 30, "nitro"),
    "m5zn.6xlarge": Limits(8, 30, 30, "nitro"),
    "m5zn.large": Limits(3, 10, 10, "nitro"),
    "m5zn.metal": Limits(15, 50, 50, ""),
    "m5zn.xlarge": Limits(4, 15, 15, "nitro"),
    "m6a.12xlarge": Limits(8, 30, 30, "nitro"),
    "m6a.16xlarge": Limits(15, 50, 50, "nitro"),
    "m6a.24xlarge": Limits(15, 50, 50, "nitro"),
    "m6a.2xlarge": Limits(4, 15, 15, "nitro"),
    "m6a.32xlarge": Limits(15, 50, 50, "nitro"),
    "m6a.48xlarge": Limits(15, 50, 50, "nitro"),
    "m6a.4xlarge": Limits(8, 30, 30, "nitro"),
    "m6a.8xlarge": Limits(8, 30, 30, "nitro"),
    "m6a.large": Limits(3, 10, 10, "nitro"),
    "m6a.xlarge": Limits(4, 15, 15, "nitro"),
    "m6g.12xlarge": Limits(8, 30, 30, "nitro"),
    "m6g.16xlarge": Limits(15, 50, 50, "nitro"),
    "m6g.2xlarge": Limits(4, 15, 15, "nitro"),
    "m6g.4xlarge": Limits(8, 30, 30, "nitro"),
    "m6g.8xlarge": Limits(8, 30, 30, "nitro"),
    "m6g.large": Limits(3, 10, 10, "nitro"),
    "m6g.medium": Limits(2, 4, 4, "nitro"),
    "m6g.metal": Limits(15, 50, 50, ""),
    "m6g.xlarge": Limits(4, 15, 15, "nitro"),
    "m6gd.12xlarge": Limits(8, 30, 30, "nitro"),
    "m6gd.16xlarge": Limits(15, 50, 50, "nitro"),
    "m6gd.2xlarge": Limits(4, 15, 15, "nitro"),
    "m6gd.4xlarge": Limits(8, 30, 30, "nitro"),
    "m6gd.8xlarge": Limits(8, 30, 30, "nitro"),
    "m6gd.large": Limits(3, 10, 10, "nitro"),
    "m6gd.medium": Limits(2, 4, 4, "nitro"),
    "m6gd.metal": Limits(15, 50, 50, ""),
    "m6gd.xlarge": Limits(4, 15, 15, "nitro"),
    "m6i.12xlarge": Limits(8, 30, 30, "nitro"),
    "m6i.16xlarge": Limits(15, 50, 50, "nitro"),
    "m6i.24xlarge": Limits(15, 50, 50, "nitro"),
    "m6i.2xlarge": Limits(4, 15, 15, "nitro"),
    "m6i.32xlarge": Limits(15, 50, 50, "nitro"),
    "m6i.4xlarge": Limits(8, 30, 30, "nitro"),
    "m6i.8xlarge": Limits(8, 30, 30, "nitro"),
    "m6i.large": Limits(3, 10, 10, "nitro"),
    "m6i.metal": Limits(15, 50, 50, ""),
    "m6i.xlarge": Limits(4, 15, 15, "nitro"),
    "mac1.metal": Limits(8, 30, 30, ""),
    "p2.16xlarge": Limits(8, 30, 30, "xen"),
    "p2.8xlarge": Limits(8, 30, 30, "xen"),
    "p2.xlarge": Limits(4, 15, 15, "xen"),
    "p3.16xlarge": Limits(8, 30, 30, "xen"),
    "p3.2xlarge": Limits(4, 15, 15, "xen"),
    "p3.8xlarge": Limits(8, 30, 30, "xen"),
    "p3dn.24xlarge": Limits(15, 50, 50, "nitro"),
    "p4d.24xlarge": Limits(60, 50, 50, "nitro"),
    "r3.2xlarge": Limits(4, 15, 15, "xen"),
    "r3.4xlarge": Limits(8, 30, 30, "xen"),
    "r3.8xlarge": Limits(8, 30, 30, "xen"),
    "r3.large": Limits(3, 10, 10, "xen"),
    "r3.xlarge": Limits(4, 15, 15, "xen"),
    "r4.16xlarge": Limits(15, 50, 50, "xen"),
    "r4.2xlarge": Limits(4, 15, 15, "xen"),
    "r4.4xlarge": Limits(8, 30, 30, "xen"),
    "r4.8xlarge": Limits(8, 30, 30, "xen"),
    "r4.large": Limits(3, 10, 10, "xen"),
    "r4.xlarge": Limits(4, 15, 15, "xen"),
    "r5.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5.large": Limits(3, 10, 10, "nitro"),
    "r5.metal": Limits(15, 50, 50, ""),
    "r5.xlarge": Limits(4, 15, 15, "nitro"),
    "r5a.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5a.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5a.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5a.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5a.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5a.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5a.large": Limits(3, 10, 10, "nitro"),
    "r5a.xlarge": Limits(4, 15, 15, "nitro"),
    "r5ad.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5ad.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5ad.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5ad.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5ad.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5ad.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5ad.large": Limits(3, 10, 10, "nitro"),
    "r5ad.xlarge": Limits(4, 15, 15, "nitro"),
    "r5b.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5b.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5b.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5b.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5b.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5b.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5b.large": Limits(3, 10, 10, "nitro"),
    "r5b.metal": Limits(15, 50, 50, ""),
    "r5b.xlarge": Limits(4, 15, 15, "nitro"),
    "r5d.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5d.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5d.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5d.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5d.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5d.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5d.large": Limits(3, 10, 10, "nitro"),
    "r5d.metal": Limits(15, 50, 50, ""),
    "r5d.xlarge": Limits(4, 15, 15, "nitro"),
    "r5dn.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5dn.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5dn.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5dn.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5dn.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5dn.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5dn.large": Limits(3, 10, 10, "nitro"),
    "r5dn.metal": Limits(15, 50, 50, ""),
    "r5dn.xlarge": Limits(4, 15, 15, "nitro"),
    "r5n.12xlarge": Limits(8, 30, 30, "nitro"),
    "r5n.16xlarge": Limits(15, 50, 50, "nitro"),
    "r5n.24xlarge": Limits(15, 50, 50, "nitro"),
    "r5n.2xlarge": Limits(4, 15, 15, "nitro"),
    "r5n.4xlarge": Limits(8, 30, 30, "nitro"),
    "r5n.8xlarge": Limits(8, 30, 30, "nitro"),
    "r5n.large": Limits(3, 10, 10, "nitro"),
    "r5n.metal": Limits(15, 50, 50, ""),
    "r5n.xlarge": Limits(4, 15, 15, "nitro"),
    "r6g.12xlarge": Limits(8, 30, 30, "nitro"),
    "r6g.16xlarge": Limits(15, 50, 50, "nitro"),
    "r6g.2xlarge": Limits(4, 15, 15, "nitro"),
    "r6g.4xlarge": Limits(8, 30, 30, "nitro"),
    "r6g.8xlarge": Limits(8, 30, 30, "nitro"),
    "r6g.large": Limits(3, 10, 10, "nitro"),
    "r6g.medium": Limits(2, 4, 4, "nitro"),
    "r6g.metal": Limits(15, 50, 50, ""),
    "r6g.xlarge": Limits(4, 15, 15, "nitro"),
    "r6gd.12xlarge": Limits(8, 30, 30, "nitro"),
    "r6gd.16xlarge": Limits(15, 50, 50, "nitro"),
    "r6gd.2xlarge": Limits(4, 15, 15, "nitro"),
    "r6gd.4xlarge": Limits(8, 30, 30, "nitro"),
    "r6gd.8xlarge": Limits(8, 30, 30, "nitro"),
    "r6gd.large": Limits(3, 10, 10, "nitro"),
    "r6gd.medium": Limits(2, 4, 4, "nitro"),
    "r6gd.metal": Limits(15, 50, 50, ""),
    "r6gd.xlarge": Limits(4, 15, 15, "nitro"),
    "r6i.12xlarge": Limits(8, 30, 30, "nitro"),
    "r6i.16xlarge": Limits(15, 50, 50, "nitro"),
    "r6i.24xlarge": Limits(15, 50, 50, "nitro"),
    "r6i.2xlarge": Limits(4, 15, 15, "nitro"),
    "r6i.32xlarge": Limits(15, 50, 50, "nitro"),
    "r6i.4xlarge": Limits(8, 30, 30, "nitro"),
    "r6i.8xlarge": Limits(8, 30, 30, "nitro"),
    "r6i.large": Limits(3, 10, 10, "nitro"),
    "r6i.metal": Limits(15, 50, 50, ""),
    "r6i.xlarge": Limits(4, 15, 15, "nitro"),
    "t1.micro": Limits(2, 2, 0, "xen"),
    "t2.2xlarge": Limits(3, 15, 15, "xen"),
    "t2.large": Limits(3, 12, 12, "xen"),
    "t2.medium": Limits(3, 6, 6, "xen"),
    "t2.micro": Limits(2, 2, 2, "xen"),
    "t2.nano": Limits(2, 2, 2, "xen"),
    "t2.small": Limits(3, 4, 4, "xen"),
    "t2.xlarge": Limits(3, 15, 15, "xen"),
    "t3.2xlarge": Limits(4, 15, 15, "nitro"),
    "t3.large": Limits(3, 12, 12, "nitro"),
    "t3.medium": Limits(3, 6, 6, "nitro"),
    "t3.micro": Limits(2, 2, 2, "nitro"),
    "t3.nano": Limits(2, 2, 2, "nitro"),
    "t3.small": Limits(3, 4, 4, "nitro"),
    "t3.xlarge": Limits(4, 15, 15, "nitro"),
    "t3a.2xlarge": Limits(4, 15, 15, "nitro"),
    "t3a.large": Limits(3, 12, 12, "nitro"),
    "t3a.medium": Limits(3, 6, 6, "nitro"),
    "t3a.micro": Limits(2, 2, 2, "nitro"),
    "t3a.nano": Limits(2, 2, 2, "nitro"),
    "t3a.small": Limits(2, 4, 4, "nitro"),
    "t3a.xlarge": Limits(4, 15, 15, "nitro"),
    "t4g.2xlarge": Limits(4, 15, 15, "nitro"),
    "t4g.large": Limits(3, 12, 12, "nitro"),
    "t4g.medium": Limits(3, 6, 6, "nitro"),
    "t4g.micro": Limits(2, 2, 2, "nitro"),
    "t4g.nano": Limits(2, 2, 2, "nitro"),
    "t4g.small": Limits(3, 4, 4, "nitro"),
    "t4g.xlarge": Limits(4, 15, 15, "nitro"),
    "u-12tb1.112xlarge": Limits(15, 50, 50, "nitro"),
    "u-3tb1.56xlarge": Limits(8, 30, 30, "nitro"),
    "u-6tb1.112xlarge": Limits(15, 50, 50, "nitro"),
    "u-6tb1.56xlarge": Limits(15, 50, 50, "nitro"),
    "u-9tb1.112xlarge": Limits(15, 50, 50, "nitro"),
    "vt1.24xlarge": Limits(15, 50, 50, "nitro"),
    "vt1.3xlarge": Limits(4, 15, 15, "nitro"),
    "vt1.6xlarge": Limits(8, 30, 30, "nitro"),
    "x1.16xlarge": Limits(8, 30, 30, "xen"),
    "x1.32xlarge": Limits(8, 30, 30, "xen"),
    "x1e.16xlarge": Limits(8, 30, 30, "xen"),
    "x1e.2xlarge": Limits(4, 15, 15, "xen"),
    "x1e.32xlarge": Limits(8, 30, 30, "xen"),
    "x1e.4xlarge": Limits(4, 15, 15, "xen"),
    "x1e.8xlarge": Limits(4, 15, 15, "xen"),
    "x1e.xlarge": Limits(3, 10, 10, "xen"),
    "x2gd.12xlarge": Limits(8, 30, 30, "nitro"),
    "x2gd.16xlarge": Limits(15, 50, 50, "nitro"),
    "x2gd.2xlarge": Limits(4, 15, 15, "nitro"),
    "x2gd.4xlarge": Limits(8, 30, 30, "nitro"),
    "x2gd.8xlarge": Limits(8, 30, 30, "nitro"),
    "x2gd.large": Limits(3, 10, 10, "nitro"),
    "x2gd.medium": Limits(2, 4, 4, "nitro"),
    "x2gd.metal": Limits(15, 50, 50, ""),
    "x2gd.xlarge": Limits(4, 15, 15, "nitro"),
    "x2iezn.12xlarge": Limits(15, 50, 50, "nitro"),
    "x2iezn.2xlarge": Limits(4, 15, 15, "nitro"),
    "x2iezn.4xlarge": Limits(8, 30, 30, "nitro"),
    "x2iezn.6xlarge": Limits(8, 30, 30, "nitro"),
    "x2iezn.8xlarge": Limits(8, 30, 30, "nitro"),
    "x2iezn.metal": Limits(15, 50, 50, ""),
    "z1d.12xlarge": Limits(15, 50, 50, "nitro"),
    "z1d.2xlarge": Limits(4, 15, 15, "nitro"),
    "z1d.3xlarge": Limits(8, 30, 30, "nitro"),
    "z1d.6xlarge": Limits(8, 30, 30, "nitro"),
    "z1d.large": Limits(3, 10, 10, "nitro"),
    "z1d.metal": Limits(15, 50, 50, ""),
    "z1d.xlarge": Limits(4, 15, 15, "nitro"),
}
